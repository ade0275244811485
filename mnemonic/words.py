"""
Built-in word lists for mnemonic generation.
"""

# Lowercase ASCII only, so default mnemonics never contain the separator
ADJECTIVES = (
    "admiring", "amazing", "awesome", "blissful", "bold", "brave", "busy",
    "calm", "charming", "clever", "cool", "crazy", "dazzling", "determined",
    "eager", "ecstatic", "elastic", "elegant", "epic", "fervent", "focused",
    "friendly", "gallant", "gifted", "goofy", "gracious", "happy", "hopeful",
    "hungry", "inspiring", "jolly", "jovial", "keen", "kind", "laughing",
    "loving", "lucid", "magical", "modest", "musing", "mystifying", "nice",
    "nifty", "nostalgic", "objective", "optimistic", "peaceful", "pensive",
    "practical", "quirky", "quizzical", "relaxed", "reverent", "romantic",
    "serene", "sharp", "silly", "sleepy", "stoic", "sweet", "tender",
    "thirsty", "trusting", "upbeat", "vibrant", "vigilant", "wizardly",
    "wonderful", "youthful", "zealous", "zen",
)

NOUNS = (
    "alan", "babbage", "bardeen", "bell", "bohr", "boole", "curie", "darwin",
    "dijkstra", "einstein", "euclid", "euler", "faraday", "fermat", "fermi",
    "feynman", "galileo", "gauss", "goodall", "hawking", "hopper", "hypatia",
    "jordan", "kepler", "knuth", "lamport", "larry", "lovelace", "maxwell",
    "meitner", "mendel", "newton", "noether", "pascal", "pasteur", "planck",
    "ritchie", "shannon", "steve", "tesla", "thompson", "torvalds", "turing",
    "volta", "wozniak", "wright",
)
