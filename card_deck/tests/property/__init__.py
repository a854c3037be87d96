"""属性测试"""
