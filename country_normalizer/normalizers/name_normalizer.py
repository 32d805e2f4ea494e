import string
from typing import List, Optional

from country_normalizer.normalizers.rules import DEFAULT_RULES, NormalizationRules

ASCII_PUNCTUATION = frozenset(string.punctuation)


def tokenize(text: str, rules: NormalizationRules = DEFAULT_RULES) -> List[str]:
    return rules.token_pattern.findall(text)


def normalize_name(name: Optional[str], rules: NormalizationRules = DEFAULT_RULES) -> str:
    """Reduce ``name`` to the space separated key used for index lookups.

    >>> normalize_name("St. Kitts & Nevis")
    'saint kitts and nevis'
    """
    if not name:
        return ""
    words: List[str] = []
    for token in tokenize(name.lower(), rules):
        if len(token) == 1:
            if token in rules.symbol_words:
                words.extend(rules.symbol_words[token])
            elif token not in ASCII_PUNCTUATION:
                words.append(token)
        elif token in rules.stop_words:
            continue
        elif token in rules.rewrites:
            words.extend(rules.rewrites[token])
        else:
            words.append(token)
    return " ".join(words)
