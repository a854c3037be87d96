"""单元测试"""
