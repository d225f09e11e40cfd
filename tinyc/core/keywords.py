from typing import Dict, Mapping

from .tokens import Keyword

# The scanner only ever calls .get() on this
KeywordMap = Mapping[str, Keyword]


def default_keywords() -> Dict[str, Keyword]:
    """Return a fresh keyword table keyed by spelling"""
    return {keyword.value: keyword for keyword in Keyword}
