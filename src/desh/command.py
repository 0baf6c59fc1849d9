""" One pipe segment ready to be executed. """
from .lexer import tokenize


class Command:
    def __init__(self, segment, name, args):
        self.segment = segment    # text as written, used in messages
        self.name = name
        self.args = args

    @classmethod
    def parse(cls, segment):
        tokens = tokenize(segment)
        if not tokens:
            return cls(segment, "", [])
        return cls(segment, tokens[0], tokens[1:])

    @property
    def argv(self):
        return [self.name] + self.args

    def tolerates(self, returncode):
        """ grep exits 1 when nothing matched; that is not a failure. """
        return returncode == 0 or (self.name == "grep" and returncode == 1)
