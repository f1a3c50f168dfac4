"""
Channel Information Domain Model
Channel resolution result for the Data API source
"""


class ChannelInfo:
    """
    Domain model representing a resolved YouTube channel.
    Represents a VALID channel state only.
    """

    def __init__(self, channel_id: str, title: str, custom_url: str = ""):
        self.channel_id = channel_id
        self.title = title
        self.custom_url = custom_url

    def __repr__(self) -> str:
        return f"ChannelInfo(title={self.title!r}, handle={self.custom_url!r}, id={self.channel_id!r})"
