"""
Organizer API - Groups Module

Task groups (board columns). Created alongside each new user; read by state assembly.
"""
