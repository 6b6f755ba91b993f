"""Value types for the persisted provider configuration."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from power_git.core.errors import ConfigCorruptError
from power_git.core.platform import KNOWN_PLATFORMS


@dataclass(frozen=True)
class ProviderRecord:
    """Credentials stored for one provider.

    Empty url or token means the field has not been configured.
    """

    name: str
    url: str
    token: str
    is_default: bool

    def to_json_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "cfg": {"url": self.url, "token": self.token, "default": self.is_default},
        }


@dataclass(frozen=True)
class ConfigDocument:
    """The full set of provider records, persisted as one JSON array.

    Instances are snapshots: every change returns a new document which the
    caller hands to ConfigStore.replace_all().
    """

    records: tuple[ProviderRecord, ...]

    def find(self, name: str) -> ProviderRecord | None:
        for record in self.records:
            if record.name == name:
                return record
        return None

    def default_record(self) -> ProviderRecord | None:
        for record in self.records:
            if record.is_default:
                return record
        return None

    def with_record(self, updated: ProviderRecord) -> "ConfigDocument":
        """Return a copy with the record of the same name replaced.

        Position is preserved. A name with no existing record leaves the
        document unchanged.
        """
        return ConfigDocument(
            records=tuple(
                updated if record.name == updated.name else record for record in self.records
            )
        )

    def with_default(self, name: str, *, is_default: bool) -> "ConfigDocument":
        """Return a copy with the default flag updated for `name`.

        Marking a provider as default clears the flag on every other provider.
        Clearing it only touches `name`.
        """
        records: list[ProviderRecord] = []
        for record in self.records:
            if record.name == name:
                records.append(replace(record, is_default=is_default))
            elif is_default and record.is_default:
                records.append(replace(record, is_default=False))
            else:
                records.append(record)
        return ConfigDocument(records=tuple(records))

    def to_json_data(self) -> list[dict[str, Any]]:
        return [record.to_json_data() for record in self.records]

    @staticmethod
    def from_json_data(data: object, *, path: Path) -> "ConfigDocument":
        """Parse the decoded JSON array.

        Args:
            data: Result of json.loads() on the config file
            path: File the data came from, used in error messages

        Raises:
            ConfigCorruptError: If the data does not match the expected shape
                or names the same provider twice
        """
        if not isinstance(data, list):
            raise ConfigCorruptError(path=path, reason="expected a JSON array of providers")

        records: list[ProviderRecord] = []
        seen: set[str] = set()
        for index, entry in enumerate(data):
            record = _parse_record(entry, index=index, path=path)
            if record.name in seen:
                raise ConfigCorruptError(
                    path=path, reason=f"provider '{record.name}' appears more than once"
                )
            seen.add(record.name)
            records.append(record)
        return ConfigDocument(records=tuple(records))


def _parse_record(entry: object, *, index: int, path: Path) -> ProviderRecord:
    if not isinstance(entry, dict):
        raise ConfigCorruptError(path=path, reason=f"entry {index} is not an object")
    name = entry.get("name")
    cfg = entry.get("cfg")
    if not isinstance(name, str) or not isinstance(cfg, dict):
        raise ConfigCorruptError(path=path, reason=f"entry {index} needs 'name' and 'cfg'")

    url = cfg.get("url")
    token = cfg.get("token")
    is_default = cfg.get("default")
    if not isinstance(url, str) or not isinstance(token, str):
        raise ConfigCorruptError(path=path, reason=f"'{name}' needs string 'url' and 'token'")
    if not isinstance(is_default, bool):
        raise ConfigCorruptError(path=path, reason=f"'{name}' needs a boolean 'default'")
    return ProviderRecord(name=name, url=url, token=token, is_default=is_default)


def default_document() -> ConfigDocument:
    """Document written on first run: every known provider, nothing configured."""
    return ConfigDocument(
        records=tuple(
            ProviderRecord(name=platform.value, url="", token="", is_default=False)
            for platform in KNOWN_PLATFORMS
        )
    )
