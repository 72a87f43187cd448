class SquircleError(Exception):
    pass


class PathSyntaxError(SquircleError):

    def __init__(self,
                 message,
                 position=None,
                 text=None,
                 span: int = 40):
        super().__init__(message)
        self.position = position
        self.text = text
        self.span = span

    def __str__(self):
        if self.text is not None and self.position is not None:
            p = max(self.position - self.span, 0) if self.span > 1 else 0
            pointer = " " * (self.position - p) + "^"
            return (f"Path syntax error: {self.args[0]}\n"
                    f"{self.text[p:self.position + self.span]}\n{pointer}")
        return f"Path syntax error: {self.args[0]}"
