"""Exception hierarchy shared across kickstart."""


class KickstartError(Exception):
    """Base exception for kickstart failures reported to the user."""
    pass


class OverwriteDeclined(KickstartError):
    """The user refused to overwrite an existing output directory."""

    def __init__(self, output_dir):
        super().__init__(f"Output directory already exists: {output_dir}")
        self.output_dir = output_dir


class MetadataError(KickstartError):
    """The generated project's package.json could not be parsed."""
    pass
