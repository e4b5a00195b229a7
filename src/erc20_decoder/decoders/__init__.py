"""
ERC20 calldata decoders.

Selector and contract lookup tables plus the transfer decoder that ties
them together.
"""
