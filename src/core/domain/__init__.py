"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 y dataclasses congeladas).
- El dominio no conoce HTTP, CLI, ni SDKs: solo temas, componentes y ficheros.
"""
