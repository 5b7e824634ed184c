"""
Factories de estrategias y destinos
"""
