"""
Word lists and the word repository for Terminal Wordle.

WORDS holds the secret words a round can be played on. ACCEPTABLE holds
extra words the player may guess but that are never picked as the secret.
Both lists are five-letter lowercase words and are never modified at
runtime.
"""

import logging
import random

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Secret words
# ---------------------------------------------------------------------------
WORDS = [
    "about", "above", "abuse", "actor", "acute", "admit", "adopt", "adult",
    "after", "again", "agent", "agree", "ahead", "alarm", "album", "alert",
    "alike", "alive", "allow", "alone", "along", "alter", "among", "angel",
    "anger", "angle", "angry", "anime", "ankle", "apart", "apple", "apply",
    "arena", "argue", "arise", "armor", "array", "aside", "asset", "audio",
    "avoid", "award", "aware", "badly", "baker", "bases", "basic", "basis",
    "beach", "began", "begin", "being", "below", "bench", "berry", "birth",
    "black", "blade", "blame", "bland", "blank", "blast", "blaze", "bleed",
    "blend", "bless", "blind", "block", "blood", "bloom", "blown", "board",
    "bonus", "boost", "bound", "brain", "brand", "brave", "bread", "break",
    "breed", "brick", "bride", "brief", "bring", "broad", "broke", "brown",
    "brush", "build", "bunch", "burst", "buyer", "cabin", "candy", "carry",
    "catch", "cause", "chain", "chair", "chaos", "charm", "chart", "chase",
    "cheap", "check", "cheek", "chess", "chest", "chief", "child", "china",
    "chunk", "claim", "clash", "class", "clean", "clear", "click", "cliff",
    "climb", "cling", "clock", "clone", "close", "cloth", "cloud", "coach",
    "coast", "color", "comet", "comic", "coral", "couch", "could", "count",
    "court", "cover", "crack", "craft", "crane", "crash", "crazy", "cream",
    "crime", "cross", "crowd", "crown", "cruel", "crush", "curve", "cycle",
    "daily", "dance", "dealt", "debug", "decay", "delay", "delta", "dense",
    "depth", "derby", "devil", "dirty", "donor", "doubt", "draft", "drain",
    "drama", "drank", "drawn", "dream", "dress", "dried", "drift", "drink",
    "drive", "drove", "drunk", "dying", "eager", "early", "earth", "eight",
    "elect", "elite", "email", "empty", "enemy", "enjoy", "enter", "equal",
    "error", "essay", "event", "every", "exact", "exile", "exist", "extra",
    "faint", "fairy", "faith", "false", "fancy", "fatal", "fault", "feast",
    "fiber", "field", "fifth", "fifty", "fight", "final", "first", "fixed",
    "flame", "flash", "flask", "flesh", "float", "flood", "floor", "flour",
    "fluid", "flush", "flute", "focus", "force", "forge", "forth", "forum",
    "found", "frame", "frank", "fraud", "fresh", "front", "frost", "fruit",
    "fully", "funny", "ghost", "giant", "given", "gland", "glass", "globe",
    "gloom", "glory", "glove", "going", "grace", "grade", "grain", "grand",
    "grant", "grape", "graph", "grasp", "grass", "grave", "great", "green",
    "greet", "grief", "grill", "grind", "groan", "gross", "group", "grove",
    "grown", "guard", "guess", "guest", "guide", "guild", "guilt", "habit",
    "happy", "harsh", "haste", "haven", "heart", "heavy", "hence", "herbs",
    "honey", "honor", "horse", "hotel", "house", "human", "humor", "hurry",
    "ideal", "image", "imply", "index", "inner", "input", "irony", "issue",
    "ivory", "joint", "joker", "judge", "juice", "knack", "kneel", "knife",
    "knock", "known", "label", "large", "laser", "later", "laugh", "layer",
    "learn", "lease", "least", "leave", "legal", "lemon", "level", "light",
    "limit", "linen", "liver", "local", "lodge", "logic", "login", "loose",
    "lover", "lower", "loyal", "lunar", "lunch", "lying", "magic", "major",
    "maker", "manor", "maple", "march", "match", "maybe", "mayor", "meant",
    "media", "mercy", "merit", "metal", "meter", "midst", "might", "minor",
    "minus", "mixed", "model", "money", "month", "moral", "motor", "mount",
    "mouse", "mouth", "moved", "movie", "muddy", "music", "naval", "nerve",
    "never", "newly", "night", "noble", "noise", "north", "noted", "novel",
    "nurse", "nylon", "occur", "ocean", "offer", "often", "olive", "onset",
    "opera", "orbit", "order", "organ", "other", "ought", "outer", "owner",
    "oxide", "ozone", "paint", "panel", "panic", "paper", "patch", "pause",
    "peace", "pearl", "penny", "phase", "phone", "photo", "piano", "piece",
    "pilot", "pinch", "pitch", "pixel", "place", "plain", "plane", "plant",
    "plate", "plaza", "plead", "pluck", "plumb", "plume", "point", "porch",
    "poser", "posit", "pound", "power", "press", "price", "pride", "prime",
    "print", "prior", "prize", "prone", "proof", "prose", "proud", "prove",
    "psalm", "pulse", "punch", "pupil", "purse", "queen", "query", "quest",
    "queue", "quick", "quiet", "quote", "radar", "radio", "raise", "rally",
    "range", "rapid", "ratio", "reach", "react", "ready", "realm", "rebel",
    "reign", "relax", "reply", "rider", "ridge", "rifle", "right", "rigid",
    "rival", "river", "robin", "robot", "rocky", "roger", "roman", "rouge",
    "rough", "round", "route", "royal", "rural", "sadly", "saint", "salad",
    "scale", "scene", "scope", "score", "sense", "serve", "setup", "seven",
    "shade", "shaft", "shake", "shall", "shame", "shape", "share", "sharp",
    "shear", "sheep", "sheer", "sheet", "shelf", "shell", "shift", "shine",
    "shirt", "shock", "shore", "short", "shout", "sight", "sigma", "since",
    "sixth", "sixty", "sized", "skill", "skull", "slave", "sleep", "slide",
    "slope", "small", "smart", "smell", "smile", "smoke", "snake", "solar",
    "solid", "solve", "sorry", "sound", "south", "space", "spare", "spark",
    "speak", "speed", "spend", "spent", "spice", "spine", "spite", "split",
    "spoke", "spoon", "sport", "spray", "squad", "stack", "staff", "stage",
    "stain", "stake", "stale", "stall", "stamp", "stand", "stare", "stark",
    "start", "state", "stays", "steam", "steel", "steep", "steer", "stern",
    "stick", "stiff", "still", "stock", "stone", "stood", "store", "storm",
    "story", "stout", "stove", "strap", "straw", "strip", "stuck", "study",
    "stuff", "style", "sugar", "suite", "sunny", "super", "surge", "swamp",
    "swear", "sweet", "swept", "swift", "swing", "sword", "swore", "sworn",
    "syrup", "table", "taste", "teach", "tease", "tempo", "tenor", "tense",
    "terms", "theft", "theme", "there", "thick", "thing", "think", "third",
    "those", "three", "threw", "throw", "thumb", "tiger", "tight", "timer",
    "tired", "title", "today", "token", "topic", "total", "touch", "tough",
    "towel", "tower", "toxic", "trace", "track", "trade", "trail", "train",
    "trait", "trash", "treat", "trend", "trial", "tribe", "trick", "tried",
    "troop", "truck", "truly", "trump", "trunk", "trust", "truth", "tulip",
    "tumor", "tweed", "twice", "twist", "tying", "ultra", "uncle", "under",
    "union", "unity", "until", "upper", "upset", "urban", "usage", "usual",
    "utter", "valid", "value", "vapor", "vault", "verse", "video", "vigor",
    "vinyl", "viral", "virus", "visit", "vista", "vital", "vivid", "vocal",
    "vodka", "voice", "voter", "wagon", "waste", "watch", "water", "weary",
    "weave", "wedge", "weird", "wheat", "wheel", "where", "which", "while",
    "white", "whole", "whose", "width", "witch", "woman", "women", "world",
    "worry", "worse", "worst", "worth", "would", "wound", "wrath", "write",
    "wrong", "wrote", "yacht", "yield", "young", "youth", "zebra",
]

# ---------------------------------------------------------------------------
# Additional acceptable guesses
# ---------------------------------------------------------------------------
ACCEPTABLE = [
    "aback", "abbey", "abhor", "abide", "abort", "acorn", "adage", "adept",
    "adieu", "admin", "affix", "afoot", "aglow", "aisle", "algae", "alien",
    "align", "allot", "alloy", "aloft", "aloud", "alpha", "amber", "amble",
    "amend", "ample", "amuse", "annex", "antic", "anvil", "aorta", "aphid",
    "arbor", "ardor", "aroma", "arrow", "ashen", "askew", "atoll", "attic",
    "augur", "avail", "awake", "awful", "axiom", "azure", "bacon", "badge",
    "bagel", "baggy", "balmy", "banjo", "barge", "baron", "basin", "batch",
    "bathe", "baton", "bawdy", "bayou", "beady", "beard", "beast", "beefy",
    "befit", "beget", "belch", "belly", "beret", "bevel", "bible", "bicep",
    "bigot", "biome", "birch", "bison", "bitty", "blare", "bleak", "blimp",
    "blink", "bliss", "bloat", "blond", "bluff", "blunt", "blurb", "blurt",
    "blush", "boast", "bobby", "bogus", "bongo", "booth", "booty", "booze",
    "borax", "bosom", "bossy", "botch", "bough", "boxer", "brawl", "brawn",
    "briar", "brine", "brink", "brisk", "broil", "brood", "brook", "broth",
    "brunt", "buddy", "budge", "buggy", "bugle", "bulge", "bully", "bumpy",
    "burly", "butte", "cacao", "cadet", "camel", "cameo", "canal", "canny",
    "canoe", "caper", "carat", "cargo", "carol", "caste", "cater", "cease",
    "cedar", "chalk", "chant", "chard", "cheer", "chewy", "chick", "chide",
    "chili", "chill", "chime", "chirp", "choir", "choke", "chord", "chore",
    "cider", "cigar", "cinch", "civic", "civil", "clamp", "clasp", "cleat",
    "cleft", "clerk", "cloak", "clove", "clown", "clump", "coral", "corny",
    "couch", "cough", "coupe", "covet", "cower", "crate", "crawl", "creak",
    "creed", "creek", "creep", "crepe", "crest", "crimp", "crisp", "croak",
    "crony", "crook", "crumb", "crust", "crypt", "cubic", "cumin", "curio",
    "curly", "curry", "cyber", "dairy", "daisy", "dandy", "datum", "decal",
    "decoy", "decry", "defer", "deity", "delve", "demon", "denim", "depot",
    "detox", "diary", "digit", "diner", "dingy", "disco", "ditch", "ditto",
    "dizzy", "dodge", "dogma", "dolly", "dough", "dowdy", "dowel", "drawl",
    "dread", "droll", "drool", "droop", "dross", "duchy", "dunce", "dusky",
    "dusty", "dwarf", "dwell", "eagle", "easel", "ebony", "edict", "eerie",
    "egret", "eject", "elbow", "elder", "elope", "elude", "embed", "ember",
    "enact", "endow", "ensue", "envoy", "epoch", "equip", "erode", "erupt",
    "ethic", "evade", "evoke", "exalt", "excel", "expel", "fable", "facet",
    "fella", "feign", "femur", "fence", "feral", "ferry", "fetch", "fetus",
    "fever", "fiery", "filth", "finch", "fjord", "flair", "flake", "flank",
    "fleet", "flick", "fling", "flint", "flirt", "flock", "floss", "flown",
    "fluff", "fluke", "flung", "foamy", "folly", "foray", "forgo", "forte",
    "foyer", "frail", "freak", "frill", "frisk", "frock", "froth", "frown",
    "froze", "fudge", "fungi", "furor", "fussy", "fuzzy", "gaffe", "gaily",
    "gamut", "gaudy", "gauge", "gaunt", "gauze", "gecko", "geese", "genie",
    "genre", "ghoul", "girth", "glare", "glaze", "gleam", "glean", "glide",
    "glint", "gloat", "gnash", "gnome", "golem", "goose", "gorge", "gouge",
    "gourd", "grate", "gravy", "graze", "greed", "gripe", "grout", "growl",
    "gruel", "gruff", "grunt", "guava", "guise", "gulch", "gully", "gumbo",
    "gusto", "gypsy", "hairy", "halve", "handy", "hardy", "harem", "hasty",
    "hatch", "haunt", "hazel", "heady", "hedge", "hefty", "heist", "helix",
    "hello", "heron", "hinge", "hippo", "hitch", "hoard", "hobby", "hoist",
    "homer", "hound", "hover", "howdy", "humid", "hunch", "husky", "hydro",
    "hyena", "hymen", "icily", "icing", "igloo", "inane", "inept", "inert",
    "infer", "ingot", "inlet", "islet", "itchy", "jaunt", "jazzy", "jelly",
    "jerky", "jetty", "jewel", "jiffy", "jolly", "joust", "juicy", "jumbo",
    "jumpy", "karma", "kayak", "kebab", "khaki", "kinky", "kiosk", "kitty",
    "knelt", "koala", "krill", "ladle", "lager", "lance", "lanky", "lapel",
    "lapse", "latch", "lathe", "leafy", "leaky", "ledge", "leech", "leery",
    "lefty", "libel", "lilac", "limbo", "lingo", "llama", "lobby", "lofty",
    "lolly", "loopy", "lousy", "lucid", "lucky", "lumen", "lumpy", "lurch",
    "lusty", "lyric", "macaw", "macho", "madam", "mafia", "mambo", "mange",
    "mango", "mania", "manly", "marsh", "mason", "matey", "mauve", "maxim",
    "mealy", "meaty", "medal", "melee", "melon", "mimic", "mince", "mirth",
    "miser", "missy", "mocha", "modem", "mogul", "moist", "molar", "moldy",
    "mommy", "mores", "mossy", "motel", "motif", "motto", "moult", "mound",
    "mourn", "mucus", "mulch", "mummy", "mural", "murky", "mushy", "musty",
    "naive", "nanny", "nasal", "nasty", "natal", "needy", "nerdy", "newer",
    "nicer", "niche", "niece", "ninja", "ninth", "nobly", "nomad", "notch",
    "nudge", "nutty", "nymph", "oaken", "obese", "octal", "octet", "odder",
    "offal", "olden", "onion", "opine", "optic", "otter", "ounce", "outdo",
    "ovary", "ovoid", "owing", "paddy", "pagan", "palsy", "pansy", "papal",
    "parka", "party", "pasta", "paste", "patio", "patsy", "payee", "peach",
    "pecan", "pedal", "penal", "perch", "peril", "perky", "pesky", "petal",
    "petty", "picky", "piety", "piggy", "pinky", "pious", "piper", "pique",
    "pivot", "pizza", "plaid", "plank", "plier", "plush", "poach", "polka",
    "poppy", "posse", "pouch", "prank", "prawn", "preen", "prick", "primo",
    "privy", "probe", "prong", "prowl", "proxy", "prude", "prune", "pudgy",
    "puffy", "pulpy", "puppy", "puree", "purge", "pushy", "quack", "quail",
    "qualm", "quart", "quash", "quell", "quilt", "quirk", "rabbi", "rabid",
    "racer", "rainy", "ramen", "ranch", "randy", "raspy", "raven", "rayon",
    "razor", "rebus", "recap", "recur", "regal", "rehab", "relic", "remit",
    "renew", "repay", "retch", "rhino", "rhyme", "rinse", "ripen", "risky",
    "rivet", "roast", "rodeo", "rogue", "roomy", "roost", "rowdy", "ruddy",
    "rugby", "ruler", "rumba", "rumor", "rupee", "rusty", "sable", "saggy",
    "salon", "salsa", "salty", "sandy", "sassy", "satin", "sauce", "saucy",
    "sauna", "savor", "savvy", "scald", "scalp", "scaly", "scamp", "scant",
    "scarf", "scary", "scoff", "scold", "scone", "scoop", "scorn", "scour",
    "scout", "scowl", "scram", "scrap", "scrub", "sedan", "seedy", "segue",
    "seize", "serum", "sever", "shack", "shady", "shaky", "shard", "shawl",
    "shiny", "shown", "showy", "shrub", "shrug", "shyly", "siege", "sieve",
    "silky", "silly", "since", "sinew", "siren", "sissy", "skate", "skier",
    "skimp", "skirt", "skunk", "slack", "slain", "slang", "slant", "slate",
    "sleek", "sleet", "slept", "slice", "slick", "slimy", "sling", "slosh",
    "sloth", "slump", "slung", "slunk", "slurp", "slush", "smack", "smash",
    "smear", "smelt", "smirk", "smite", "smith", "smock", "snack", "snail",
    "snare", "snarl", "sneak", "sneer", "snide", "sniff", "snipe", "snoop",
    "snore", "snort", "snout", "snowy", "snuck", "snuff", "soapy", "sober",
    "soggy", "sonic", "sooth", "sooty", "sound", "spade", "spank", "spasm",
    "spawn", "spear", "speck", "spell", "spicy", "spiel", "spiky", "spill",
    "spiny", "splat", "spoof", "spook", "spool", "spore", "spout", "spree",
    "sprig", "spunk", "spurn", "spurt", "squat", "squib", "staid", "stalk",
    "stank", "stash", "stead", "steed", "stent", "stilt", "sting", "stink",
    "stint", "stoic", "stoke", "stole", "stomp", "stony", "stool", "stoop",
    "strut", "stump", "stung", "stunk", "stunt", "suave", "sulky", "sully",
    "sumac", "surer", "surly", "sushi", "swami", "swash", "swath", "sweat",
    "swell", "swill", "swine", "swirl", "swoon", "swoop", "synod", "taboo",
    "tacit", "tacky", "taffy", "taint", "tally", "talon", "tamer", "tango",
    "tangy", "taper", "tapir", "tardy", "tarot", "taunt", "tawny", "teary",
    "teddy", "teeth", "tempt", "tenet", "tepid", "thief", "thigh", "thorn",
    "threw", "throb", "thyme", "tiara", "tibia", "tidal", "tilde", "tipsy",
    "toast", "toddy", "topaz", "torch", "torso", "totem", "toxin", "tramp",
    "trawl", "tread", "triad", "trite", "troll", "trope", "trout", "truce",
    "tryst", "tubal", "tuber", "tummy", "tunic", "turbo", "tutor", "twang",
    "tweak", "twine", "twirl", "udder", "ulcer", "umbra", "unfit", "unify",
    "unlit", "unmet", "untie", "unzip", "usher", "usurp", "utile", "vague",
    "valet", "valor", "vegan", "venom", "venue", "verge", "vicar", "vigil",
    "viola", "viper", "visor", "vixen", "vogue", "vouch", "vowel", "wacky",
    "wafer", "waltz", "waste", "waver", "weedy", "welsh", "whack", "whale",
    "wharf", "whelp", "whiff", "whirl", "whisk", "wield", "wimpy", "wince",
    "winch", "windy", "wispy", "witty", "woken", "woody", "wooer", "wordy",
    "worse", "wreak", "wreck", "wrest", "wring", "wrist", "wryly", "yearn",
    "yeast", "yodel", "zesty", "zonal",
]


class WordRepository:
    """Immutable lookup and selection over the bundled word lists."""

    def __init__(self, secrets=WORDS, extra=ACCEPTABLE, rng=random):
        # Keep the secret order stable so a seeded rng picks reproducibly.
        self._choices = tuple(dict.fromkeys(w.lower() for w in secrets))
        self.secrets = frozenset(self._choices)
        self.acceptable = self.secrets | frozenset(w.lower() for w in extra)
        self.rng = rng
        logger.debug("loaded %d secret words, %d acceptable guesses",
                     len(self.secrets), len(self.acceptable))

    def __len__(self):
        return len(self._choices)

    def is_valid_secret(self, word):
        """Return True if word can be chosen as a secret."""
        return word.lower() in self.secrets

    def is_acceptable_guess(self, word):
        """Return True if word is a secret word or an extra guess word."""
        return word.lower() in self.acceptable

    def random_secret(self):
        """Choose a secret word uniformly at random.

        Raises ValueError when no secret words are loaded.
        """
        if not self._choices:
            raise ValueError("no secret words loaded")
        return self.rng.choice(self._choices)
