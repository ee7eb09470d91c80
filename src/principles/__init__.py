"""Demostraciones SOLID (una por principio).

Cada módulo contiene la variante que viola el principio, el refactor que lo
respeta y una implementación de `core.interfaces.demonstration.Demonstration`.
"""

from principles.dependency_inversion import DependencyInversionDemo
from principles.interface_segregation import InterfaceSegregationDemo
from principles.liskov_substitution import LiskovSubstitutionDemo
from principles.open_closed import OpenClosedDemo
from principles.single_responsibility import SingleResponsibilityDemo

__all__ = [
    "DependencyInversionDemo",
    "InterfaceSegregationDemo",
    "LiskovSubstitutionDemo",
    "OpenClosedDemo",
    "SingleResponsibilityDemo",
]
