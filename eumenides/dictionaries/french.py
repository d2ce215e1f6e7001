"""
French word lists.
"""

from eumenides.schemas.dictionary import LanguageDictionary


FRENCH = LanguageDictionary(
    code="fr",
    name="Français",
    anger_words=[
        'con', 'conne', 'connard', 'connasse', 'salaud', 'salope', 'ordure',
        'idiot', 'idiote', 'imbécile', 'crétin', 'crétine', 'débile', 'abruti',
        'enfoiré', 'enculé', 'pute', 'fils de pute', 'fdp', 'pd', 'enculer',
        'taré', 'tarée', 'cinglé', 'dingue', 'malade', 'tordu', 'tordue',
        'demeuré', 'attardé', 'mongolien', 'trisomique', 'autiste',

        'merde', 'putain', 'bordel', 'chier', 'foutre', 'niquer',
        'emmerdeur', 'emmerdeuse', 'emmerdant', 'emmerdante', 'chiant', 'chiante',
        'casse-couilles', 'casse-burnes', 'fait chier', 'va te faire',

        'incompétent', 'incompétente', 'nul', 'nulle', 'minable', 'nullité',
        'pathétique', 'lamentable', 'pitoyable', 'ridicule', 'grotesque',
        'aberrant', 'aberrante', 'absurde', 'stupide', 'bête',
        'médiocre', 'pourri', 'pourrie', 'foutu', 'foutue',

        'horrible', 'atroce', 'abominable', 'dégueulasse', 'dégoûtant',
        'répugnant', 'ignoble', 'infâme', 'immonde', 'infecte', 'sordide',
        'hideux', 'hideuse', 'monstrueux', 'monstrueuse', 'odieux', 'odieuse',
        'abject', 'abjecte', 'vil', 'vile', 'innommable',

        'insupportable', 'inacceptable', 'inadmissible', 'intolérable',
        'scandaleux', 'scandaleuse', 'honteux', 'honteuse', 'révoltant',
        'choquant', 'choquante', 'consternant', 'consternante',
        'catastrophique', 'désastreux', 'désastreuse', 'déplorable',
        'navrant', 'navrante', 'affligeant', 'affligeante',

        'injuste', 'injustifiable', 'indéfendable', 'incompréhensible',
        'hors de question', 'pas question',

        'vicieux', 'vicieuse', 'malveillant', 'malveillante', 'toxique',
        'nocif', 'nocive', 'néfaste', 'pervers', 'perverse', 'sadique',
        'méchant', 'méchante', 'cruel', 'cruelle', 'barbare',

        'rien', 'zéro', 'nullard', 'raté', 'ratée', 'loser', 'perdant',
        'bon à rien', 'incapable', 'inutile', 'fainéant',

        'déchet', 'rebut', 'sous-merde', 'sous-homme', 'parasite', 'vermine',

        'méprisable', 'mépris', 'exécrable', 'démentiel', 'démentielle',
        'délirant', 'délirante', 'aberration', 'farce', 'blague', 'bouffon',

        'connerie', 'conneries', 'foutaise', 'branler', 'branleur',
        'enculé de ta race', 'ta gueule', 'ferme ta gueule', 'ta race',
        'nique', 'nique ta mère', 'ntm', 'batard', 'fumier', 'ordure'
    ],

    very_negative_words=[
        'haine', 'déteste', 'détester', 'crever', 'mort', 'tuer',
        'enculer', 'niquer sa mère', 'ntm', 'nique ta mère',
        'va mourir', 'crève', 'suicide', 'cancer', 'sida',
        'sale race', 'racaille', 'terroriste', 'fasciste', 'nazi',
        'violer', 'viol', 'assassin', 'massacre', 'génocide'
    ],

    frustration_words=[
        'sérieusement', 'franchement', 'vraiment', 'sincèrement',
        'frustrant', 'frustrante', 'énervant', 'énervante',
        'agaçant', 'agaçante', 'irritant', 'irritante',
        'pénible', 'gonflant', 'gonflante', 'saoulant', 'saoulante',
        'insensé', 'insensée', 'dément', 'démente',
        "n'importe quoi", 'quoi', 'encore', 'toujours', 'jamais',
        'comment', 'pourquoi', 'pfff', 'tss', 'bref',
        'la honte', 'honte', 'gênant', 'gênante', 'embarrassant',
        'oh la la', 'purée', 'punaise', 'zut', 'flûte'
    ]
)
