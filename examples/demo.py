"""Stats Structurizer -- Quick demo.

Run: python examples/demo.py
"""


def main():
    from stats_structurizer import SAMPLES, detect_signature, parse, select_strategy, table_to_tsv

    for i, (name, text) in enumerate(SAMPLES.items(), start=1):
        print("=" * 60)
        print(f"{i}. SAMPLE: {name.upper()}")
        print("=" * 60)
        print(f"  Strategy: {select_strategy(detect_signature(text))}")

        tables = parse(text)
        print(f"  Tables found: {len(tables)}")
        for table in tables:
            groups = ", ".join(g.title for g in table.column_groups or [])
            print(f"  - {table.title}: {len(table.rows)} rows x {len(table.headers)} columns")
            if groups:
                print(f"    Groups: {groups}")

        # First few lines of the first table, spreadsheet-style
        preview = table_to_tsv(tables[0]).split("\n")[:3]
        for line in preview:
            print(f"    {line.expandtabs(12)[:72]}")
        print()

    print("Done! Try the CLI: stats-structurizer sample league | stats-structurizer parse")


if __name__ == "__main__":
    main()
