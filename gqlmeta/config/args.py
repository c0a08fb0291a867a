# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import override

from ..util.config import DefaultArgParser


class ArgParser(DefaultArgParser):
    @override
    def initialize(self) -> None:
        super().initialize()

        # Inputs
        self.add("input.schema_file", "-s", "--schema", action="store", help="GraphQL SDL file to transform")
        self.add("input.resources_file", "--resources", action="store", help="YAML file with the resolver resources generated for the schema")

        # Outputs
        self.add("output.schema_file", "-o", "--output", action="store", help="Where to write the transformed schema, defaults to standard output")
        self.add("output.resources_file", "--output-resources", action="store", help="Where to write the transformed resources")
