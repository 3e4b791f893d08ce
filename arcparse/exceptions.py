__author__ = 'ArcParse Contributors'
__all__ = [
    'ConfigError',
    'BenchmarkError',
    'BenchmarkSyntaxError',
]


class ConfigError(Exception):

    def __init__(self, msg=None, filename=None, section=None, option=None):
        super().__init__(msg, (filename, section, option))
        self.msg = msg
        self.filename = filename
        self.section = section
        self.option = option

    def __str__(self):
        location = ':'.join(str(part) for part in (self.filename, self.section, self.option)
                            if part is not None)
        if location:
            return '%s (%s)' % (self.msg, location)
        return str(self.msg)


class BenchmarkError(Exception):
    """A gold head assignment that cannot be used for the sentence it belongs to."""

    def __init__(self, msg, heads_field=None, expected=None, found=None):
        super().__init__(msg, heads_field)
        self.msg = msg
        self.heads_field = heads_field
        self.expected = expected
        self.found = found

    def __str__(self):
        return str(self.msg)

    def located(self, filename, lineno, offset=1, text=None) -> 'BenchmarkSyntaxError':
        """The same error, pinned to the benchmark file line it was read from."""
        return BenchmarkSyntaxError(self.msg, filename, lineno, offset, text, self.heads_field,
                                    self.expected, self.found)


class BenchmarkSyntaxError(BenchmarkError, SyntaxError):
    """A malformed line in a benchmark file."""

    def __init__(self, msg, filename, lineno, offset=1, text=None, heads_field=None,
                 expected=None, found=None):
        SyntaxError.__init__(self, msg, (filename, lineno, offset, text))
        self.heads_field = heads_field
        self.expected = expected
        self.found = found

    def __str__(self):
        return '%s (%s, line %d)' % (self.msg, self.filename, self.lineno)

    def __repr__(self):
        return '%s(%r, %r, %r)' % (type(self).__name__, self.msg, self.filename, self.lineno)
