"""Basic usage example for linkedmap."""

from linkedmap import DuplicateKeyError, LinkedMap, MissingKeyError


def main() -> None:
    """Demonstrate basic map operations."""
    print("=== Basic LinkedMap Example ===\n")

    lm = LinkedMap[str]().add("alpha").add("beta").add("gamma")
    print(f"Built:         {lm}")
    print(f"Head / tail:   {lm.head} / {lm.tail}")
    print(f"Size:          {lm.size()}\n")

    # Re-adding moves a value to the tail; the original is unchanged
    moved = lm.add("alpha")
    print(f"After add:     {moved}")
    print(f"Original:      {lm}\n")

    removed = moved.remove("gamma")
    print(f"After remove:  {removed}")
    print(f"Reversed:      {list(reversed(removed))}\n")

    try:
        removed.add_new("beta", if_present="raise")
    except DuplicateKeyError as exc:
        print(f"Rejected:      {exc}")

    try:
        removed.remove("delta", if_missing="raise")
    except MissingKeyError as exc:
        print(f"Rejected:      {exc}")


if __name__ == "__main__":
    main()
