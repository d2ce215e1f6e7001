"""
Italian word lists.
"""

from eumenides.schemas.dictionary import LanguageDictionary


ITALIAN = LanguageDictionary(
    code="it",
    name="Italiano",
    anger_words=[
        'idiota', 'imbecille', 'scemo', 'stupido', 'cretino',
        'stronzo', 'merda', 'cazzo', 'porca', 'puttana',
        'bastardo', 'figlio di puttana', 'vaffanculo', 'fanculo',
        'deficiente', 'demente', 'mongoloide', 'ritardato',
        'pezzo di merda', 'faccia di culo', 'testa di cazzo',

        'orribile', 'terribile', 'disgustoso', 'ripugnante', 'schifoso',
        'patetico', 'ridicolo', 'assurdo', 'inutile', 'incompetente',
        'pessimo', 'porcheria', 'schifo', 'disastro',
        'miserabile', 'deplorevole', 'vergognoso', 'penoso',

        'odioso', 'detestabile', 'spregevole', 'abietto',
        'immondo', 'fetido', 'lurido', 'sudicio',
        'mostruoso', 'orrendo', 'atroce', 'raccapricciante',

        'cazzo', 'minchia', 'porco', 'porca madonna',
        'porca miseria', 'porca puttana', 'porco dio',
        'cacchio', 'cavolo', 'accidenti', 'diamine',

        'malvagio', 'cattivo', 'crudele', 'sadico',
        'perverso', 'vile', 'vigliacco', 'infame',

        'nessuno', 'niente', 'zero', 'nullità',
        'perdente', 'fallito', 'sfigato', 'sfigata'
    ],

    very_negative_words=[
        'odio', 'odiare', 'ammazzare', 'morire', 'morte', 'morto',
        'vaffanculo', 'va a morire', 'crepa', 'muori',
        'uccidere', 'assassino', 'terrorista', 'stupratore',
        'nazista', 'fascista'
    ],

    frustration_words=[
        'sul serio', 'davvero', 'di nuovo', 'sempre', 'mai',
        'fastidioso', 'irritante', 'frustrante', 'noioso',
        'dio mio', 'madonna', 'incredibile', 'assurdo',
        'ma dai', 'ma come', 'perché', 'boh', 'basta', 'uffa'
    ]
)
