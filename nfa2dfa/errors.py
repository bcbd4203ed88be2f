class Nfa2DfaError(Exception):
    pass


class NFAFormatError(Nfa2DfaError, ValueError):
    """ошибка разбора текстового описания nfa; lineno — номер строки (с 1)"""

    def __init__(self, message: str, lineno: int):
        super().__init__(f"строка {lineno}: {message}")
        self.lineno = lineno
