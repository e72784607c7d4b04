# flexport/core/domain/multi_value.py

"""Multi-valued, usergroup-scoped export properties

A MultiValue keeps an ordered list of values per usergroup. Both exporters
read it through the same three methods (get_csv_fragment, get_xml_fragment,
get_value_name) so usergroup handling is identical in every output format.
"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Set as AbstractSet

# Local imports
from flexport.core.domain.usergroups import DEFAULT_USERGROUP
from flexport.core.domain.usergroups import UsergroupKey
from flexport.core.domain.usergroups import usergroup_key
from flexport.core.domain.usergroups import usergroup_label
from flexport.core.domain.values import RawValue
from flexport.core.domain.values import Value
from flexport.core.types.fragments import XmlFragment
from flexport.core.types.fragments import XmlValue


class MultiValue:
    """Values of one export field, grouped by usergroup

    CSV rendering matches requested usergroups exactly: a usergroup without
    values of its own contributes nothing.
    """

    __slots__ = ("name", "collection_name", "separator", "value_type", "value_tag", "_values")

    def __init__(
        self,
        name: str,
        collection_name: str,
        separator: str,
        value_type: type[Value] = Value,
        value_tag: str | None = None,
    ):
        """Initialize an empty collection

        Args:
            name: Export name of the whole field (e.g. "names")
            collection_name: Element name of one usergroup bucket, or of each
                value when value_tag is not set (e.g. "name")
            separator: String used to join values in a CSV cell
            value_type: Value class raw inputs are converted to
            value_tag: Element name of each value inside a bucket element
        """
        self.name = name
        self.collection_name = collection_name
        self.separator = separator
        self.value_type = value_type
        self.value_tag = value_tag
        self._values: dict[UsergroupKey, list[Value]] = {}

    @property
    def values(self) -> dict[UsergroupKey, list[Value]]:
        """Snapshot of all buckets keyed by usergroup key"""
        return {key: list(bucket) for key, bucket in self._values.items()}

    def add_value(self, value: Value | RawValue, usergroup: str = "") -> None:
        """Append a value to the bucket of its usergroup

        Args:
            value: Raw value or a ready-made Value instance
            usergroup: Usergroup to file the value under; when empty, a Value
                instance keeps its own usergroup
        """
        item = self._coerce(value, usergroup)
        self._values.setdefault(self._bucket_for(item), []).append(item)

    def set_value(self, value: Value | RawValue, usergroup: str = "") -> None:
        """Replace the bucket of the value's usergroup with this single value"""
        item = self._coerce(value, usergroup)
        self._values[self._bucket_for(item)] = [item]

    def add_values(self, values: Iterable[Value | RawValue], usergroup: str = "") -> None:
        for value in values:
            self.add_value(value, usergroup)

    def get_values(self, usergroup: str = "") -> list[Value]:
        """Values stored for exactly this usergroup (no fallback)"""
        return list(self._values.get(usergroup_key(usergroup), []))

    def usergroups(self) -> list[str]:
        """Usergroups that have a bucket, in insertion order ("" = default)"""
        return [usergroup_label(key) for key in self._values]

    def is_empty(self) -> bool:
        return not any(self._values.values())

    def get_value_name(self) -> str:
        """Field name used for this property in serialized output"""
        return self.name

    def get_csv_fragment(self, usergroups: AbstractSet[str] = frozenset()) -> str:
        """Render the values visible to the requested usergroups as one CSV cell

        Args:
            usergroups: Usergroup context of the export; empty means the
                default bucket only

        Returns:
            Separator-joined values, or "" if no bucket matches
        """
        return self.separator.join(
            self._csv_value(value)
            for bucket in self._resolve_buckets(usergroups)
            for value in bucket
        )

    def get_xml_fragment(self) -> list[XmlFragment]:
        """One fragment per non-empty usergroup bucket, in insertion order"""
        return [
            XmlFragment(
                name=self.collection_name,
                usergroup=usergroup_label(key),
                value_tag=self.value_tag,
                key=self._xml_key(),
                values=tuple(self._xml_value(value) for value in bucket),
            )
            for key, bucket in self._values.items()
            if bucket
        ]

    def _coerce(self, value: Value | RawValue, usergroup: str) -> Value:
        if isinstance(value, Value):
            if usergroup and usergroup != value.usergroup:
                return value.model_copy(update={"usergroup": usergroup})
            return value
        return self.value_type(value, usergroup=usergroup)

    def _bucket_for(self, value: Value) -> UsergroupKey:
        return usergroup_key(value.usergroup)

    def _requested_keys(self, usergroups: AbstractSet[str]) -> list[UsergroupKey]:
        if not usergroups:
            return [DEFAULT_USERGROUP]
        return list(dict.fromkeys(usergroup_key(group) for group in sorted(usergroups)))

    def _resolve_buckets(self, usergroups: AbstractSet[str]) -> list[list[Value]]:
        requested = self._requested_keys(usergroups)
        return [self._values[key] for key in requested if key in self._values]

    def _csv_value(self, value: Value) -> str:
        return value.get_csv_fragment()

    def _xml_key(self) -> str | None:
        return None

    def _xml_value(self, value: Value) -> XmlValue:
        return XmlValue(
            tag=self.value_tag or self.collection_name,
            text=value.value,
            attributes=value.xml_attributes(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, values={self.values!r})"


class UsergroupAwareMultiValue(MultiValue):
    """MultiValue whose CSV rendering falls back to the default usergroup

    A requested usergroup without values of its own uses the default bucket.
    The fallback is a single step: it never borrows another usergroup's values,
    and a usergroup that has values is never merged with the default ones.
    """

    __slots__ = ()

    def _resolve_buckets(self, usergroups: AbstractSet[str]) -> list[list[Value]]:
        resolved: list[UsergroupKey] = []
        for key in self._requested_keys(usergroups):
            if key in self._values:
                target = key
            elif DEFAULT_USERGROUP in self._values:
                target = DEFAULT_USERGROUP
            else:
                continue
            if target not in resolved:
                resolved.append(target)
        return [self._values[key] for key in resolved]
