import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from oiddb._types import DataSetMapping, TableEntry
from oiddb.exceptions import InvalidDataSetError

# Accepted spellings for each DataSet field, in lookup order. The compact
# keys follow the layout of hand-written JSON OID bundles.
_FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
    "set_name": ("set_name", "setName", "name"),
    "name_to_oid": ("name_to_oid", "nameToOid", "oid"),
    "short_to_name": ("short_to_name", "shortToName", "short"),
    "alias_to_name": ("alias_to_name", "aliasToName", "alias"),
}


def _frozen_table(
    field_name: str, data: Optional[Mapping[Any, Any]]
) -> Mapping[str, str]:
    if data is None:
        return MappingProxyType({})
    if not isinstance(data, Mapping):
        raise InvalidDataSetError(
            f"{field_name} must be a mapping, got {type(data).__name__}"
        )
    table: Dict[str, str] = {}
    for k, v in data.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise InvalidDataSetError(
                f"{field_name} entries must map str to str, got {k!r}: {v!r}"
            )
        table[k] = v
    return MappingProxyType(table)


@dataclass(frozen=True)
class DataSet:
    """A named, immutable bundle of identifier mappings offered for registration.

    The registry copies entries out of a DataSet and remembers only its
    `set_name`; it never keeps a reference to the DataSet itself.

    Arguments:
        set_name: Unique label. A registry merges each label at most once.
        name_to_oid: Canonical name -> dotted OID string.
        short_to_name: Short attribute name (e.g. "CN") -> canonical name.
        alias_to_name: Informal alias (e.g. "P-256") -> canonical name.

    Raises:
        InvalidDataSetError: If `set_name` is empty or a table is not a
            mapping of strings to strings.

    Examples:
        >>> ds = DataSet("example", {"commonName": "2.5.4.3"}, {"CN": "commonName"})
        >>> ds.name_to_oid["commonName"]
        '2.5.4.3'
    """

    set_name: str
    name_to_oid: Mapping[str, str]
    short_to_name: Mapping[str, str] = field(default_factory=dict)
    alias_to_name: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.set_name, str) or not self.set_name:
            raise InvalidDataSetError("DataSet set_name must be a non-empty string")
        if self.name_to_oid is None:
            raise InvalidDataSetError(
                f"DataSet {self.set_name!r} requires a name_to_oid mapping"
            )
        # frozen dataclass: copy each table into a read-only view
        for name in ("name_to_oid", "short_to_name", "alias_to_name"):
            object.__setattr__(self, name, _frozen_table(name, getattr(self, name)))

    @classmethod
    def from_dict(cls, data: DataSetMapping) -> "DataSet":
        """
        Create a DataSet from a plain mapping.

        Each field may be spelled snake_case (`name_to_oid`), camelCase
        (`nameToOid`) or in the compact form (`name`, `oid`, `short`,
        `alias`).

        Raises:
            InvalidDataSetError: If the input is not a mapping or lacks
                a set name or a name-to-OID table.
        """
        if not isinstance(data, Mapping):
            raise InvalidDataSetError(
                f"data set must be a mapping, got {type(data).__name__}"
            )
        values: Dict[str, Any] = {}
        for field_name, keys in _FIELD_KEYS.items():
            for key in keys:
                if key in data:
                    values[field_name] = data[key]
                    break
        if "set_name" not in values:
            raise InvalidDataSetError("data set is missing its set name")
        if "name_to_oid" not in values:
            raise InvalidDataSetError(
                f"data set {values['set_name']!r} is missing its name-to-OID table"
            )
        return cls(**values)

    @classmethod
    def from_json(cls, s: str, **kwargs: Any) -> "DataSet":
        """
        Deserialize a JSON object string into a DataSet.

        Raises:
            json.JSONDecodeError: If the input string is not valid JSON.
            InvalidDataSetError: If the decoded value is not a valid data set.
        """
        return cls.from_dict(json.loads(s, **kwargs))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "set_name": self.set_name,
            "name_to_oid": dict(self.name_to_oid),
            "short_to_name": dict(self.short_to_name),
            "alias_to_name": dict(self.alias_to_name),
        }

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def oid_entries(self) -> Iterator[TableEntry]:
        return iter(self.name_to_oid.items())

    def short_entries(self) -> Iterator[TableEntry]:
        return iter(self.short_to_name.items())

    def alias_entries(self) -> Iterator[TableEntry]:
        return iter(self.alias_to_name.items())

    def __len__(self) -> int:
        return len(self.name_to_oid)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.set_name!r}, "
            f"names={len(self.name_to_oid)}, shorts={len(self.short_to_name)}, "
            f"aliases={len(self.alias_to_name)})"
        )
