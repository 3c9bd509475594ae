"""
核心模块：配置、日志与存储服务
"""
