# flexport/core/domain/collections.py

"""Aggregate collections with fixed export names"""

# Standard library imports
from collections.abc import Set as AbstractSet
from typing import ClassVar

# Local imports
from flexport.core.domain.enums import ImageType
from flexport.core.domain.multi_value import MultiValue
from flexport.core.domain.multi_value import UsergroupAwareMultiValue
from flexport.core.domain.usergroups import DEFAULT_USERGROUP
from flexport.core.domain.usergroups import UsergroupKey
from flexport.core.domain.values import Image
from flexport.core.domain.values import Keyword
from flexport.core.domain.values import Ordernumber
from flexport.core.domain.values import RawValue
from flexport.core.domain.values import Usergroup
from flexport.core.domain.values import Value


class AllOrdernumbers(UsergroupAwareMultiValue):
    """Every ordernumber of an item in one pipe-joined view

    Ordernumbers are collected into the default bucket whatever usergroup
    they are tagged with, so CSV output always lists all of them. The export
    name is the constant VALUE_NAME, distinct from the "ordernumbers" bucket
    element name.
    """

    __slots__ = ()

    VALUE_NAME: ClassVar[str] = "allOrdernumbers"
    SEPARATOR: ClassVar[str] = "|"

    def __init__(self) -> None:
        super().__init__(
            "ordernumbers",
            "ordernumbers",
            self.SEPARATOR,
            Ordernumber,
            value_tag=Ordernumber.XML_TAG,
        )

    def add_ordernumber(self, ordernumber: Ordernumber | RawValue) -> None:
        self.add_value(ordernumber)

    def get_value_name(self) -> str:
        return self.VALUE_NAME

    def get_csv_fragment(self, usergroups: AbstractSet[str] = frozenset()) -> str:
        """Pipe-joined ordernumbers in insertion order; the usergroup context is ignored"""
        if DEFAULT_USERGROUP in self._values:
            return self.SEPARATOR.join(
                ordernumber.get_csv_fragment() for ordernumber in self._values[DEFAULT_USERGROUP]
            )
        return ""

    def _bucket_for(self, value: Value) -> UsergroupKey:
        return DEFAULT_USERGROUP


class AllKeywords(UsergroupAwareMultiValue):
    """Search keywords, optionally scoped per usergroup"""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("allKeywords", "keywords", ",", Keyword, value_tag=Keyword.XML_TAG)

    def add_keyword(self, keyword: Keyword | RawValue, usergroup: str = "") -> None:
        self.add_value(keyword, usergroup)


class AllImages(UsergroupAwareMultiValue):
    """Image URLs, optionally scoped per usergroup

    CSV output lists default images only; thumbnails appear in XML alone.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("allImages", "images", ",", Image, value_tag=Image.XML_TAG)

    def add_image(self, image: Image | RawValue, usergroup: str = "") -> None:
        self.add_value(image, usergroup)

    def get_csv_fragment(self, usergroups: AbstractSet[str] = frozenset()) -> str:
        return self.separator.join(
            image.get_csv_fragment()
            for bucket in self._resolve_buckets(usergroups)
            for image in bucket
            if isinstance(image, Image) and image.type is ImageType.DEFAULT
        )


class Usergroups(MultiValue):
    """Usergroups an item is visible to"""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__("usergroups", Usergroup.XML_TAG, ",", Usergroup)

    def add_usergroup(self, usergroup: Usergroup | RawValue) -> None:
        # The usergroup name is the payload; it always lives in the default bucket
        self.add_value(usergroup)

    def get_csv_fragment(self, usergroups: AbstractSet[str] = frozenset()) -> str:
        """Comma-joined usergroups; the usergroup context is ignored"""
        return self.separator.join(
            usergroup.get_csv_fragment() for usergroup in self._values.get(DEFAULT_USERGROUP, [])
        )

    def _bucket_for(self, value: Value) -> UsergroupKey:
        return DEFAULT_USERGROUP
