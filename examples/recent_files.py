"""Track recently opened files, most recent last."""

from linkedmap import LinkedMap


def main() -> None:
    """Demonstrate move-to-end tracking and independent versions."""
    recent = LinkedMap[str]()
    snapshots = []

    for path in ["a.txt", "b.txt", "c.txt", "a.txt", "d.txt", "b.txt"]:
        recent = recent.add(path)
        snapshots.append(recent)
        print(f"open {path:6} -> {recent.to_list()}")

    print(f"\nMost recent: {recent.tail}")
    print(f"Least recent: {recent.head}")

    # Every earlier version is still intact
    print(f"\nAfter first three opens: {snapshots[2].to_list()}")

    closed = recent.remove("c.txt")
    print(f"After closing c.txt: {closed.to_list()}")
    print(f"Still tracked in previous version: {'c.txt' in recent}")


if __name__ == "__main__":
    main()
