"""
 Router capability model

 The router describes itself at /API/Capabilities as a list of Features, each
 with a URI template ("/API/LAN/WIFI/{wlan_ifc}") and the operations it
 allows, letter coded: R(ead), W(rite), I(nvoke), A(dd), D(elete), Q(uery).
"""

import re
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import Field

from pylivebox.codecs import LiveboxModel, enum_field

PATH_VARIABLE_REGEX = re.compile(r'\{([^}]+)\}')


class Operation(Enum):
    READ = "R"      # resource can be read
    WRITE = "W"     # resource can be modified
    INVOKE = "I"    # action can be triggered
    ADD = "A"       # child resources can be added
    DELETE = "D"    # resource can be deleted
    QUERY = "Q"     # resource description can be read

    def __str__(self):
        return self.name.lower()


# Letters are case sensitive on the wire but a lowercase letter is harmless
OperationField = enum_field(Operation)


class Feature(LiveboxModel):
    id: str = Field(alias="Id")
    uri: str = Field(alias="Uri")
    ops: Tuple[OperationField, ...] = Field(alias="Ops")

    def supports(self, operation: Operation) -> bool:
        return operation in self.ops

    def get_path_variable_names(self) -> List[str]:
        """Placeholder names in order of appearance, duplicates included."""
        return PATH_VARIABLE_REGEX.findall(self.uri)

    def get_path(self, path_variables: Optional[Mapping[str, str]] = None) -> str:
        """
        Replace each {name} with its value. Placeholders with no value are
        left in place; checking completeness is up to the caller.
        """
        path = self.uri
        for name, value in (path_variables or {}).items():
            path = path.replace("{%s}" % name, str(value))
        return path


class Capabilities(LiveboxModel):
    features: Tuple[Feature, ...] = Field(alias="Features")

    def feature_ids(self) -> List[str]:
        return [feature.id for feature in self.features]

    def index(self) -> Dict[str, Feature]:
        # Later duplicates win
        return {feature.id: feature for feature in self.features}

    def __len__(self):
        return len(self.features)

