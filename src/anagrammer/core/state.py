# src/anagrammer/core/state.py
"""
Global state stored in Redis: the dictionary used when a query names none.
"""

import redis

from anagrammer.core.store import check_name


STATE_KEY = "anagrammer:state:dictionary"
DEFAULT_DICTIONARY = "default"


def get_active_dictionary(client: redis.Redis) -> str:
    value = client.get(STATE_KEY)
    if value is None:
        return DEFAULT_DICTIONARY
    return value.decode()


def set_active_dictionary(client: redis.Redis, name: str) -> str:
    """Make name the active dictionary, returning the previous one."""
    check_name(name)
    previous = client.getset(STATE_KEY, name)
    if previous is None:
        return DEFAULT_DICTIONARY
    return previous.decode()
