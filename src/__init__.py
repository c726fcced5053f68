"""Image Label Search"""
