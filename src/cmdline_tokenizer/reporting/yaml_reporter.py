# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

from __future__ import annotations

import yaml

from .plain import PlainReporter


class YamlReporter(PlainReporter):
    """Dump records as a single YAML document; messages stay plain text."""

    def records(self, parsed) -> None:
        doc = {"arguments": parsed.to_list()}
        yaml.safe_dump(
            doc,
            self.out,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
