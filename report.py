import json


def format_table(table: dict[str, int]) -> str:
    return json.dumps(table, indent=None, ensure_ascii=False)


def display(table: dict[str, int], label: str = "Frequencies:"):
    print(label, format_table(table))
