# This file makes the 'utils' directory a Python sub-package
# within 'solc_remap'.
#
# It contains the remappings file loader.
