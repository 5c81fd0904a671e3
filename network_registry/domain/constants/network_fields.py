"""Constants for Network model field names"""


class NetworkFields:
    """Field name constants for Network model"""
    ID = "id"
    CHAIN_ID = "chain_id"
    NAME = "name"
    RPC_URL = "rpc_url"
    OTHER_RPC_URLS = "other_rpc_urls"
    TEST_NET = "test_net"
    BLOCK_EXPLORER_URL = "block_explorer_url"
    FEE_MULTIPLIER = "fee_multiplier"
    GAS_LIMIT_MULTIPLIER = "gas_limit_multiplier"
    ACTIVE = "active"
    DEFAULT_SIGNER_ADDRESS = "default_signer_address"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
