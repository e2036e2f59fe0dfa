"""Adaptadores de infraestructura (HTTP/GitHub, disco, zip)."""
