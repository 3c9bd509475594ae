"""
七牛云Kodo对象存储适配器
"""

__version__ = "1.0.0"
