from counter import count_chars
from report import display


SUBJECT = "lethukuthula"


def main(text: str):
    table = count_chars(text)
    display(table)


if __name__ == "__main__":
    main(SUBJECT)
