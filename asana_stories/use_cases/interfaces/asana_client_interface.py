from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Dict
from typing import Optional
from typing import Tuple

from asana_stories.entities.pagination import NextPage
from asana_stories.entities.pagination import Options


class AsanaClientInterface(ABC):
    """Shared client that performs one HTTP round trip per call.

    Implementations unwrap the ``data`` envelope and raise on failure; they
    never return a partial result.
    """

    @abstractmethod
    def get(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        *options: Options,
    ) -> Tuple[Any, Optional[NextPage]]:
        pass

    @abstractmethod
    def post(self, path: str, body: Any = None, *options: Options) -> Any:
        pass

    @abstractmethod
    def put(self, path: str, body: Any = None, *options: Options) -> Any:
        pass
