# This file makes the 'service' directory a Python sub-package
# within 'solc_remap'.
#
# It contains the line transform registered with the preprocessing hook
# and the pass that drives it over a sources directory.
