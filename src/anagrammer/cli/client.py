"""
HTTP client for the Anagrammer API.

Every request carries db=ANAGRAMMER_REDIS_DB so the CLI and the server
agree on which Redis database holds dictionaries and state.
"""

import httpx

from anagrammer.config import Settings


def base_url() -> str:
    return Settings.from_env().api_url.rstrip("/")


def db_params() -> dict:
    return {"db": Settings.from_env().redis_db}


# === Dictionaries ===

def create_dictionary(name: str, words: list[str]) -> dict:
    r = httpx.post(f"{base_url()}/dictionaries", params=db_params(),
                   json={"name": name, "words": words}, timeout=60)
    r.raise_for_status()
    return r.json()


def list_dictionaries() -> list[dict]:
    r = httpx.get(f"{base_url()}/dictionaries", params=db_params())
    r.raise_for_status()
    return r.json()["dictionaries"]


def get_dictionary(name: str) -> dict:
    r = httpx.get(f"{base_url()}/dictionaries/{name}", params=db_params())
    r.raise_for_status()
    return r.json()


def delete_dictionary(name: str) -> dict:
    r = httpx.delete(f"{base_url()}/dictionaries/{name}", params=db_params())
    r.raise_for_status()
    return r.json()


# === State ===

def get_active_dictionary() -> dict:
    r = httpx.get(f"{base_url()}/state/dictionary", params=db_params())
    r.raise_for_status()
    return r.json()


def set_active_dictionary(name: str) -> dict:
    r = httpx.put(f"{base_url()}/state/dictionary", params=db_params(), json={"name": name})
    r.raise_for_status()
    return r.json()


# === Anagrams ===

def word_anagrams(word: str, dictionary: str | None = None) -> dict:
    payload = {"word": word}
    if dictionary:
        payload["dictionary"] = dictionary
    r = httpx.post(f"{base_url()}/anagrams/word", params=db_params(), json=payload, timeout=60)
    r.raise_for_status()
    return r.json()


def sentence_anagrams(sentence: list[str], dictionary: str | None = None) -> dict:
    payload = {"sentence": sentence}
    if dictionary:
        payload["dictionary"] = dictionary
    r = httpx.post(f"{base_url()}/anagrams/sentence", params=db_params(), json=payload, timeout=300)
    r.raise_for_status()
    return r.json()
