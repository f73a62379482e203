# solc_remap: import remapping helpers for a Solidity build toolchain.
#
# The loader reads find=replace pairs from remappings.txt and the line
# transform rewrites import statements with them before compilation.
