# enrollment_service/schemas/address.py
from pydantic import BaseModel, Field
from typing import Literal, Optional

BrazilianState = Literal[
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS",
    "MG", "PA", "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC",
    "SP", "SE", "TO",
]


class AddressBase(BaseModel):
    cep: str = Field(
        ..., pattern=r"^\d{5}-?\d{3}$", json_schema_extra={"example": "01001-000"}
    )
    street: str = Field(..., min_length=1, json_schema_extra={"example": "Praça da Sé"})
    city: str = Field(..., min_length=1, json_schema_extra={"example": "São Paulo"})
    number: str = Field(..., min_length=1, json_schema_extra={"example": "100"})
    state: BrazilianState
    neighborhood: str = Field(..., min_length=1, json_schema_extra={"example": "Sé"})
    complement: Optional[str] = None
    address_detail: Optional[str] = None


class AddressCreate(AddressBase):
    pass


class AddressUpdate(AddressBase):
    pass


class AddressResult(BaseModel):
    """Address as exposed to clients: no timestamps, no enrollment back-reference."""

    id: int
    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    complement: Optional[str] = None
    address_detail: Optional[str] = None

    model_config = {"from_attributes": True}


class CepAddress(BaseModel):
    """The subset of a ViaCEP answer that clients care about."""

    logradouro: str
    complemento: str
    bairro: str
    cidade: str
    uf: str
