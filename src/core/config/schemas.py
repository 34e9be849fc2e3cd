"""
Pydantic schemas for plugin configuration validation.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Union


class FreestreamConfig(BaseModel):
    """Freestream conditions used for inlet profiles and dynamic pressure."""
    velocity: float = Field(
        default=16.0,
        description="Freestream speed U_inf [m/s]"
    )
    density: float = Field(
        default=1.225,
        ge=0,
        description="Fluid density [kg/m³]"
    )


class ReferenceConfig(BaseModel):
    """Reference geometry for non-dimensionalisation."""
    area: float = Field(
        default=0.4,
        ge=0,
        description="Reference area AREF [m²]"
    )
    length: float = Field(
        default=0.435,
        gt=0,
        description="Reference length LREF [m] (chord, sets the quarter-chord moment centre)"
    )


class FilesConfig(BaseModel):
    """Side-channel input and results output files."""
    angle_file: str = Field(
        default="aoa.txt",
        description="Text file holding the current angle of attack [deg]"
    )
    results_file: str = Field(
        default="aoa_results.txt",
        description="Tab-separated coefficient log (append mode)"
    )

    @field_validator('angle_file', 'results_file')
    @classmethod
    def validate_filename(cls, v):
        """File names cannot be blank."""
        if not v or not v.strip():
            raise ValueError("File name cannot be empty")
        return v.strip()


class UDFConfig(BaseModel):
    """Top-level plugin configuration."""
    name: str = Field(default="aoa_udf", description="Case name")
    description: str = Field(default="", description="Case description")

    surface_zone: Union[int, str] = Field(
        default=5,
        description="Host surface identifier (Fluent zone id or OpenFOAM patch name)"
    )

    freestream: FreestreamConfig = Field(
        default_factory=FreestreamConfig,
        description="Freestream conditions"
    )

    reference: ReferenceConfig = Field(
        default_factory=ReferenceConfig,
        description="Reference geometry"
    )

    files: FilesConfig = Field(
        default_factory=FilesConfig,
        description="Input/output files"
    )

    verbose: bool = Field(default=True, description="Print host messages")

    class Config:
        """Pydantic config."""
        extra = "forbid"  # Catch typos in YAML
        validate_assignment = True

    @field_validator('surface_zone')
    @classmethod
    def validate_surface_zone(cls, v):
        """Patch names must be non-empty; zone ids must be non-negative."""
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("surface_zone cannot be empty")
            return v.strip()
        if v < 0:
            raise ValueError(f"surface_zone must be >= 0, got {v}")
        return v
