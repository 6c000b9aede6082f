"""
Interfaces shared between the session coordinator and its collaborators.
"""
