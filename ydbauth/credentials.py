"""Service account credentials used for the signed token exchange."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_IAM_ENDPOINT


class IamCredentials(BaseModel):
    """Immutable service account key bundle."""

    model_config = ConfigDict(frozen=True)

    service_account_id: str
    access_key_id: str
    private_key: bytes = Field(..., repr=False, description="PEM encoded key")
    iam_endpoint: str = DEFAULT_IAM_ENDPOINT

    @classmethod
    def from_json(
        cls, data: Mapping[str, Any], iam_endpoint: str = DEFAULT_IAM_ENDPOINT
    ) -> "IamCredentials":
        """Build credentials from an authorized key document.

        The document is the one issued for a service account key and holds
        ``id``, ``service_account_id`` and ``private_key``.
        """
        private_key = data["private_key"]
        if isinstance(private_key, str):
            private_key = private_key.encode()
        return cls(
            service_account_id=data["service_account_id"],
            access_key_id=data["id"],
            private_key=private_key,
            iam_endpoint=iam_endpoint,
        )

    @classmethod
    def from_json_file(
        cls, path: Union[str, Path], iam_endpoint: str = DEFAULT_IAM_ENDPOINT
    ) -> "IamCredentials":
        with open(path) as f:
            data = json.load(f)
        return cls.from_json(data, iam_endpoint=iam_endpoint)
