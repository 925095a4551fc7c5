"""Gmail 基础设施模块"""
