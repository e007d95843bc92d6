"""
Code Delivery Service Django project.
"""
