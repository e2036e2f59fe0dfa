"""Core: dominio, contratos, configuración y servicios puros.

No importa nada de `cli` ni depende de I/O salvo a través de `adapters`.
"""
