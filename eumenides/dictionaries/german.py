"""
German word lists.
"""

from eumenides.schemas.dictionary import LanguageDictionary


GERMAN = LanguageDictionary(
    code="de",
    name="Deutsch",
    anger_words=[
        'idiot', 'dummkopf', 'trottel', 'vollidiot', 'schwachkopf',
        'arschloch', 'arsch', 'scheiße', 'scheiß', 'mist',
        'blöd', 'blödmann', 'depp', 'vollpfosten', 'spacken',
        'hurensohn', 'wichser', 'fotze', 'nutte', 'schlampe',
        'drecksau', 'schwein', 'sau', 'mistkerl', 'penner',

        'schrecklich', 'furchtbar', 'grässlich', 'ekelhaft', 'widerlich',
        'erbärmlich', 'lächerlich', 'absurd', 'bescheuert', 'dämlich',
        'nutzlos', 'unfähig', 'inkompetent', 'katastrophal',
        'jämmerlich', 'kläglich', 'armselig', 'mickrig',
        'dumm', 'doof', 'beschränkt', 'hirnlos', 'geistlos',

        'abscheulich', 'widerlich', 'ekelhaft', 'abstoßend',
        'scheußlich', 'grauenhaft', 'grausam', 'brutal',
        'unmenschlich', 'barbarisch', 'sadistisch', 'pervers',
        'dreckig', 'versaut', 'verdorben', 'verfault',

        'scheiße', 'kacke', 'kotzen', 'kotze', 'pissen',
        'verdammt', 'verflucht', 'verfickt', 'beschissen',
        'fick dich', 'verpiss dich', 'leck mich',

        'nichts', 'niemand', 'versager', 'loser', 'verlierer',
        'taugenichts', 'nichtsnutz', 'abschaum', 'pack'
    ],

    very_negative_words=[
        'hass', 'hassen', 'töten', 'sterben', 'tot', 'tod',
        'fick dich', 'verpiss dich', 'verrecke', 'krepier',
        'umbringen', 'mord', 'vergewaltigung', 'terrorist',
        'nazi', 'faschist'
    ],

    frustration_words=[
        'ernsthaft', 'echt jetzt', 'schon wieder', 'immer', 'nie',
        'nervig', 'lästig', 'ärgerlich', 'frustrierend',
        'oh mann', 'meine güte', 'unglaublich', 'unmöglich',
        'wie', 'warum', 'was', 'bitte', 'ach', 'mensch'
    ]
)
