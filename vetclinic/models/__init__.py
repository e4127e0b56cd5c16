from .owner_model import Owner
from .cat_model import Cat, CatGender
from .visit_model import Visit

__all__ = ['Owner', 'Cat', 'CatGender', 'Visit']
