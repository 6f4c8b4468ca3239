"""
异常定义

核心只做前置条件检查：条件不满足时立即抛出，不做猜测或降级
"""


class XiangqiError(Exception):
    """所有核心异常的基类"""


class InactiveSideError(XiangqiError, RuntimeError):
    """当前行棋方尚未设置（游戏还没开始）"""

    def __init__(self, operation: str):
        super().__init__(f"{operation} requires an active side, call start() first")
        self.operation = operation


class NotationError(XiangqiError, ValueError):
    """记谱字符无法识别"""


class RouteError(NotationError):
    """走法字符串格式错误"""

    def __init__(self, route: str):
        super().__init__(f"Route must have at least 4 characters, got {route!r}")
        self.route = route


class EmptySquareError(XiangqiError, ValueError):
    """起始位置没有棋子"""

    def __init__(self, row: int, col: int):
        super().__init__(f"No piece at position ({row}, {col})")
        self.row = row
        self.col = col


class OffBoardError(XiangqiError, ValueError):
    """坐标超出棋盘范围"""

    def __init__(self, row: int, col: int):
        super().__init__(f"Position ({row}, {col}) is off the board")
        self.row = row
        self.col = col
