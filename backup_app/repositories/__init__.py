"""
Repositorios de persistencia
"""
