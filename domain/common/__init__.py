"""领域层公共基础模块"""
