"""
Models Package

Exports all models for easy importing.
"""

from chataru.models.product import Product
from chataru.models.enquiry import Enquiry

__all__ = ['Product', 'Enquiry']
