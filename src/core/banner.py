"""License banner prepended to every build output."""

from __future__ import annotations

COPYRIGHT_HOLDER = "TanStack"


def create_banner(display_name: str) -> str:
    """Return the MIT license comment for `display_name`.

    The text is fixed apart from the embedded name, so repeated builds produce
    byte-identical output headers.
    """

    return (
        "/**\n"
        f" * {display_name}\n"
        " *\n"
        f" * Copyright (c) {COPYRIGHT_HOLDER}\n"
        " *\n"
        " * This source code is licensed under the MIT license found in the\n"
        " * LICENSE.md file in the root directory of this source tree.\n"
        " *\n"
        " * @license MIT\n"
        " */"
    )
