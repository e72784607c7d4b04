# flexport/core/domain/__init__.py

"""Core domain models: values, multi-valued properties and items"""

# Local imports
from flexport.core.domain.collections import AllImages
from flexport.core.domain.collections import AllKeywords
from flexport.core.domain.collections import AllOrdernumbers
from flexport.core.domain.collections import Usergroups
from flexport.core.domain.enums import ExportType
from flexport.core.domain.enums import ImageType
from flexport.core.domain.item import Item
from flexport.core.domain.keyed import Attribute
from flexport.core.domain.keyed import Property
from flexport.core.domain.multi_value import MultiValue
from flexport.core.domain.multi_value import UsergroupAwareMultiValue
from flexport.core.domain.usergroups import DEFAULT_USERGROUP
from flexport.core.domain.values import Bonus
from flexport.core.domain.values import DateAdded
from flexport.core.domain.values import Description
from flexport.core.domain.values import Image
from flexport.core.domain.values import Keyword
from flexport.core.domain.values import Name
from flexport.core.domain.values import Ordernumber
from flexport.core.domain.values import Price
from flexport.core.domain.values import SalesFrequency
from flexport.core.domain.values import Sort
from flexport.core.domain.values import Summary
from flexport.core.domain.values import Url
from flexport.core.domain.values import Usergroup
from flexport.core.domain.values import Value

__all__ = [
    "AllImages",
    "AllKeywords",
    "AllOrdernumbers",
    "Attribute",
    "Bonus",
    "DEFAULT_USERGROUP",
    "DateAdded",
    "Description",
    "ExportType",
    "Image",
    "ImageType",
    "Item",
    "Keyword",
    "MultiValue",
    "Name",
    "Ordernumber",
    "Price",
    "Property",
    "SalesFrequency",
    "Sort",
    "Summary",
    "Url",
    "Usergroup",
    "UsergroupAwareMultiValue",
    "Usergroups",
    "Value",
]
