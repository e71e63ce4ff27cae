# src/anagrammer/core/store.py
"""
Named dictionaries stored in Redis.

  {prefix}:dict:{name}        list of words, dictionary order
  {prefix}:dict:{name}:meta   JSON info
  {prefix}:dict_index         set of names
"""

import json
from dataclasses import asdict, dataclass
from datetime import datetime

import redis


@dataclass
class DictionaryInfo:
    name: str
    word_count: int
    created_at: str

    def to_dict(self) -> dict:
        return asdict(self)


def check_name(name: str) -> str:
    if not name or ":" in name:
        raise ValueError(f"Invalid dictionary name: {name!r}")
    return name


class DictionaryStore:
    def __init__(self, client: redis.Redis, prefix: str = "anagrammer"):
        self.client = client
        self.prefix = prefix

    def _words_key(self, name: str) -> str:
        return f"{self.prefix}:dict:{name}"

    def _meta_key(self, name: str) -> str:
        return f"{self.prefix}:dict:{name}:meta"

    def _index_key(self) -> str:
        return f"{self.prefix}:dict_index"

    def create(self, name: str, words: list[str]) -> DictionaryInfo:
        """Store a word list under name, replacing any previous one."""
        check_name(name)
        info = DictionaryInfo(
            name=name,
            word_count=len(words),
            created_at=datetime.utcnow().isoformat(),
        )

        pipe = self.client.pipeline()
        pipe.delete(self._words_key(name))
        if words:
            pipe.rpush(self._words_key(name), *words)
        pipe.set(self._meta_key(name), json.dumps(info.to_dict()))
        pipe.sadd(self._index_key(), name)
        pipe.execute()

        return info

    def get_info(self, name: str) -> DictionaryInfo | None:
        data = self.client.get(self._meta_key(name))
        if data is None:
            return None
        return DictionaryInfo(**json.loads(data.decode()))

    def get_words(self, name: str) -> list[str] | None:
        """Words in stored order, or None if the dictionary does not exist."""
        if not self.client.exists(self._meta_key(name)):
            return None
        return [w.decode() for w in self.client.lrange(self._words_key(name), 0, -1)]

    def list_all(self) -> list[DictionaryInfo]:
        infos = []
        for name in self.client.smembers(self._index_key()):
            info = self.get_info(name.decode())
            if info:
                infos.append(info)
        return sorted(infos, key=lambda i: i.name)

    def delete(self, name: str) -> bool:
        if not self.client.exists(self._meta_key(name)):
            return False
        self.client.delete(self._words_key(name), self._meta_key(name))
        self.client.srem(self._index_key(), name)
        return True

    def clear(self) -> None:
        """Remove every stored dictionary. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:dict*"):
            self.client.delete(key)
