"""card_deck测试包"""
