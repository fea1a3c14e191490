UV_FILTERS = [
    {
        "inci": "Zinc Oxide",
        "type": "mineral",
        "aka": ["zinc oxide (nano)", "ci 77947", "zno"],
    },
    {
        "inci": "Titanium Dioxide",
        "type": "mineral",
        "aka": ["titanium dioxide (nano)", "ci 77891", "tio2"],
    },
    {
        "inci": "Butyl Methoxydibenzoylmethane",
        "type": "chemical",
        "aka": ["avobenzone", "parsol 1789"],
    },
    {
        "inci": "Ethylhexyl Methoxycinnamate",
        "type": "chemical",
        "aka": ["octinoxate", "octyl methoxycinnamate", "parsol mcx"],
    },
    {
        "inci": "Isoamyl P-Methoxycinnamate",
        "type": "chemical",
        "aka": ["amiloxate", "neo heliopan e1000"],
    },
    {
        "inci": "Homosalate",
        "type": "chemical",
        "aka": ["homomenthyl salicylate"],
    },
    {
        "inci": "Ethylhexyl Salicylate",
        "type": "chemical",
        "aka": ["octisalate", "octyl salicylate"],
    },
    {
        "inci": "Octocrylene",
        "type": "chemical",
        "aka": ["octocrilene"],
    },
    {
        "inci": "Benzophenone-3",
        "type": "chemical",
        "aka": ["oxybenzone"],
    },
    {
        "inci": "Benzophenone-4",
        "type": "chemical",
        "aka": ["sulisobenzone"],
    },
    {
        "inci": "Phenylbenzimidazole Sulfonic Acid",
        "type": "chemical",
        "aka": ["ensulizole"],
    },
    {
        "inci": "Disodium Phenyl Dibenzimidazole Tetrasulfonate",
        "type": "chemical",
        "aka": ["bisdisulizole disodium", "neo heliopan ap"],
    },
    {
        "inci": "4-Methylbenzylidene Camphor",
        "type": "chemical",
        "aka": ["enzacamene", "4-mbc"],
    },
    {
        "inci": "Terephthalylidene Dicamphor Sulfonic Acid",
        "type": "chemical",
        "aka": ["ecamsule", "mexoryl sx"],
    },
    {
        "inci": "Drometrizole Trisiloxane",
        "type": "chemical",
        "aka": ["mexoryl xl"],
    },
    {
        "inci": "Methoxypropylamino Cyclohexenylidene Ethoxyethylcyanoacetate",
        "type": "chemical",
        "aka": ["mexoryl 400"],
    },
    {
        "inci": "Bis-Ethylhexyloxyphenol Methoxyphenyl Triazine",
        "type": "chemical",
        "aka": ["bemotrizinol", "tinosorb s"],
    },
    {
        "inci": "Methylene Bis-Benzotriazolyl Tetramethylbutylphenol",
        "type": "chemical",
        "aka": ["bisoctrizole", "tinosorb m", "methylene bis-benzotriazolyl tetramethylbutylphenol (nano)"],
    },
    {
        "inci": "Tris-Biphenyl Triazine",
        "type": "chemical",
        "aka": ["tinosorb a2b", "tris-biphenyl triazine (nano)"],
    },
    {
        "inci": "Ethylhexyl Triazone",
        "type": "chemical",
        "aka": ["octyl triazone", "uvinul t 150"],
    },
    {
        "inci": "Diethylhexyl Butamido Triazone",
        "type": "chemical",
        "aka": ["iscotrizinol", "uvasorb heb"],
    },
    {
        "inci": "Diethylamino Hydroxybenzoyl Hexyl Benzoate",
        "type": "chemical",
        "aka": ["uvinul a plus", "dhhb"],
    },
    {
        "inci": "Polysilicone-15",
        "type": "chemical",
        "aka": ["parsol slx", "dimethico-diethylbenzalmalonate"],
    },
]

# Names containing filter-like fragments that are not UV filters.
UV_FILTER_IGNORE = [
    "benzyl salicylate",
    "butyloctyl salicylate",
    "tridecyl salicylate",
    "methyl salicylate",
    "sodium salicylate",
    "magnesium salicylate",
    "benzyl cinnamate",
    "ethyl cinnamate",
    "polyester-8",
]

UV_FILTER_KEYWORDS = (
    "triazone",
    "triazine",
    "benzotriazol",
    "benzophenone",
    "cinnamate",
    "salicylate",
    "benzylidene",
)
