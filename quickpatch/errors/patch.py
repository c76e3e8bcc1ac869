class PatchFailedError(Exception):
    """A patch could not be applied to its target."""


class HunkMatchError(PatchFailedError):
    """
    Neither the strict nor the relaxed rendering of a hunk's before text was
    found in the document. `index` is the 1-based position of the hunk.
    """

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"hunk #{index} could not be located in the document")
