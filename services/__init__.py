"""
LUNAR NEXUS Services
"""
