"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los valores puros que comparten las demostraciones (Pydantic v2).
- El dominio no conoce la consola, la CLI ni los ejemplos concretos.
"""
