# desikata/app/title.py

from desikata.core.titles import fix_title


def run(args) -> int:
    fixed = fix_title(" ".join(args.words))

    if not fixed:
        print("✗ Empty title.")
        return 1

    print(fixed)
    return 0
