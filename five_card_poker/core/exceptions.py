"""
五张牌扑克游戏业务异常定义
所有异常同步抛出，由调用方处理
"""


class PokerGameError(Exception):
    """扑克游戏基础异常类"""
    pass


class InvalidArgumentError(PokerGameError, ValueError):
    """无效参数异常（空值、负数、格式错误）"""
    pass


class InvalidStateError(PokerGameError):
    """对象状态不允许当前操作"""
    pass


class HandFullError(InvalidStateError):
    """手牌已满异常"""
    pass


class EmptyDeckError(PokerGameError):
    """牌组已空异常"""
    pass


class GameConfigError(PokerGameError, ValueError):
    """游戏配置错误异常"""
    pass
