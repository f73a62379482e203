# This file makes the 'models' directory a Python sub-package
# within 'solc_remap'.
#
# It contains the Pydantic models for remapping rules, the build tool
# configuration and preprocessing reports.
