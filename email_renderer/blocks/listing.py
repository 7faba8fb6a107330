"""Blocs annonces — immobilier (bien, équipements, localisation) et recrutement (offre, avantages)."""
from typing import List, Literal
from .base import BaseBlock, EmailModel


class PropertySpecs(EmailModel):
    beds: int = 0
    baths: int = 0
    area: str = ""


class PropertyCardBlock(BaseBlock):
    type: Literal["property-card"] = "property-card"
    image: str = ""
    title: str = ""
    price: str = ""
    address: str = ""
    specs: PropertySpecs = PropertySpecs()
    url: str = "#"


class FeatureItem(EmailModel):
    icon: str = "check"
    text: str = ""


class FeaturesBlock(BaseBlock):
    type: Literal["features"] = "features"
    features: List[FeatureItem] = []
    columns: int = 2


class LocationBlock(BaseBlock):
    type: Literal["location"] = "location"
    map_image: str = ""
    address: str = ""
    url: str = "#"


class JobListingBlock(BaseBlock):
    type: Literal["job-listing"] = "job-listing"
    title: str = ""
    department: str = ""
    location: str = ""
    salary: str = ""
    url: str = "#"
    tags: List[str] = []


class BenefitItem(EmailModel):
    title: str = ""
    description: str = ""


class BenefitsBlock(BaseBlock):
    type: Literal["benefits"] = "benefits"
    benefits: List[BenefitItem] = []
