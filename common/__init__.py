"""跨层公共模块"""
