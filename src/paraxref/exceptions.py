class ParaxrefError(Exception):
    pass


class DocumentReadError(ParaxrefError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f'Unable to read document "{path}"'
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)
