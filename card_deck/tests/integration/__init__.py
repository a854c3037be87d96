"""集成测试"""
