from enum import Enum


class SocialFormat(Enum):
    """
    Target slots for social media images.
    Each value is (label, width, height, aspect ratio).
    """

    INSTAGRAM_SQUARE = ("Instagram Square (1:1)", 1080, 1080, "1:1")
    INSTAGRAM_PORTRAIT = ("Instagram Portrait (4:5)", 1080, 1350, "4:5")
    TWITTER_POST = ("Twitter Post (16:9)", 1200, 675, "16:9")
    TWITTER_HEADER = ("Twitter Header (3:1)", 1500, 500, "3:1")
    FACEBOOK_COVER = ("Facebook Cover (205:78)", 820, 312, "205:78")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def width(self) -> int:
        return self.value[1]

    @property
    def height(self) -> int:
        return self.value[2]

    @property
    def aspect_ratio(self) -> str:
        """Aspect ratio in the "w:h" form the media service expects."""
        return self.value[3]

    @property
    def slug(self) -> str:
        """Filesystem friendly name, e.g. instagram-portrait-4-5."""
        cleaned = "".join(c if c.isalnum() else " " for c in self.label.lower())
        return "-".join(cleaned.split())

    @classmethod
    def lookup(cls, key: str) -> "SocialFormat":
        """Resolves a format from its enum name or its display label."""
        if key in cls.__members__:
            return cls[key]
        for fmt in cls:
            if fmt.label == key:
                return fmt
        raise KeyError(key)


DEFAULT_FORMAT = SocialFormat.INSTAGRAM_SQUARE
