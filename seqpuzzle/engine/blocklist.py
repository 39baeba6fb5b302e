# Lower-case words rejected outright. Exact match only: a word merely
# containing one of these (e.g. "classic", "shell") is fine.
BLOCKED_WORDS = frozenset([
    "fuck", "shit", "bitch", "ass", "damn", "hell", "crap", "piss", "cock", "dick", "pussy", "cunt",
    "fucking", "shitting", "bitching", "asshole", "damned", "hellish", "crappy", "pissing",
    "fucker", "shitty", "bitchy", "asshat", "damnit", "hellfire", "crapper", "pisser",
    "motherfucker", "bullshit", "horseshit", "dumbass", "jackass", "smartass", "badass",
    "fuckin", "bitchin", "asswipe", "pissy",
])


def is_blocked(word: str) -> bool:
    return word.strip().lower() in BLOCKED_WORDS
