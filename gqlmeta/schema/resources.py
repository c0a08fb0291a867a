# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Resolver resources, modelled after their CloudFormation representation.

Models are frozen; use :meth:`pydantic.BaseModel.model_copy` to derive an updated resource. Serialise with
``by_alias=True`` to obtain the CloudFormation key names.
"""

from pydantic import BaseModel, ConfigDict, Field

from .resource_ids import ResourceConstants


class GetAtt(BaseModel):
    """``Fn::GetAtt`` intrinsic referencing an attribute of another resource."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    reference: tuple[str, str] = Field(alias="Fn::GetAtt")

    @classmethod
    def of(cls, resource_id: str, attribute: str) -> GetAtt:
        return cls(reference=(resource_id, attribute))

    @property
    def resource_id(self) -> str:
        return self.reference[0]

    @property
    def attribute(self) -> str:
        return self.reference[1]


class ResolverProperties(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    api_id: GetAtt | str | None = Field(default=None, alias="ApiId")
    data_source_name: GetAtt | str | None = Field(default=None, alias="DataSourceName")
    field_name: str | None = Field(default=None, alias="FieldName")
    type_name: str | None = Field(default=None, alias="TypeName")
    request_mapping_template: str | None = Field(default=None, alias="RequestMappingTemplate")
    response_mapping_template: str | None = Field(default=None, alias="ResponseMappingTemplate")


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    type: str = Field(default=ResourceConstants.RESOLVER_RESOURCE_TYPE, alias="Type")
    properties: ResolverProperties | None = Field(default=None, alias="Properties")

    def with_request_mapping_template(self, template: str) -> Resource:
        if self.properties is None:
            msg = "Cannot set the request mapping template of a resource without properties"
            raise ValueError(msg)
        properties = self.properties.model_copy(update={"request_mapping_template": template})
        return self.model_copy(update={"properties": properties})
