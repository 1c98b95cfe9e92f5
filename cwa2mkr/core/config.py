from dataclasses import dataclass, field
from os import environ
from typing import Mapping

from cwa2mkr.core import constants
from cwa2mkr.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class RelayConfig:
    host_id: str
    api_key: str = field(repr=False)

    @classmethod
    def from_environment(cls, env: Mapping[str, str] = environ) -> "RelayConfig":
        """Read the Mackerel host ID and API key, failing on the first missing one."""
        if not (host_id := env.get(constants.HOST_ID)):
            raise ConfigurationError(constants.HOST_ID)

        if not (api_key := env.get(constants.MACKEREL_APIKEY)):
            raise ConfigurationError(constants.MACKEREL_APIKEY)

        return cls(host_id=host_id, api_key=api_key)
