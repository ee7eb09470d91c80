"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan las demostraciones y los sinks.
- El runner depende de estas abstracciones, no de módulos concretos.
"""
