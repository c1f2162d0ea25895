from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pool_tags.domain.entities.contract_tag import ContractTag


class ContractTagResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    contract_address: str = Field(alias="Contract Address")
    public_name_tag: str = Field(alias="Public Name Tag")
    project_name: str = Field(alias="Project Name")
    ui_website_link: str = Field(alias="UI/Website Link")
    public_note: str = Field(alias="Public Note")

    @classmethod
    def from_entity(cls, tag: ContractTag) -> "ContractTagResponse":
        return cls(
            contract_address=tag.contract_address,
            public_name_tag=tag.public_name_tag,
            project_name=tag.project_name,
            ui_website_link=tag.ui_website_link,
            public_note=tag.public_note,
        )
