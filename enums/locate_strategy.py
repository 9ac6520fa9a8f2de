from enum import Enum


class LocateStrategy(Enum):
    CSS = "css"
    XPATH = "xpath"
