TRC20_ABI_JSON = """[
    {"type": "Constructor", "stateMutability": "Nonpayable", "inputs": [
        {"name": "name_", "type": "string"}, {"name": "symbol_", "type": "string"}
    ]},
    {"type": "Event", "name": "Transfer", "anonymous": false, "inputs": [
        {"indexed": true, "name": "from", "type": "address"},
        {"indexed": true, "name": "to", "type": "address"},
        {"indexed": false, "name": "value", "type": "uint256"}
    ]},
    {"type": "Event", "name": "Approval", "anonymous": false, "inputs": [
        {"indexed": true, "name": "owner", "type": "address"},
        {"indexed": true, "name": "spender", "type": "address"},
        {"indexed": false, "name": "value", "type": "uint256"}
    ]},
    {"type": "Function", "name": "name", "constant": true, "stateMutability": "View", "inputs": [],
        "outputs": [{"name": "", "type": "string"}]},
    {"type": "Function", "name": "decimals", "constant": true, "stateMutability": "View", "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}]},
    {"type": "Function", "name": "balanceOf", "constant": true, "stateMutability": "View",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}]},
    {"type": "Function", "name": "transfer", "stateMutability": "Nonpayable",
        "inputs": [{"name": "recipient", "type": "address"}, {"name": "amount", "type": "uint256"}],
        "outputs": [{"name": "", "type": "bool"}]},
    {"type": "Function", "name": "transferFrom", "stateMutability": "Nonpayable",
        "inputs": [
            {"name": "sender", "type": "address"},
            {"name": "recipient", "type": "address"},
            {"name": "amount", "type": "uint256"}
        ],
        "outputs": [{"name": "", "type": "bool"}]},
    {"type": "Function", "name": "approve", "stateMutability": "Nonpayable",
        "inputs": [{"name": "spender", "type": "address"}, {"name": "amount", "type": "uint256"}],
        "outputs": [{"name": "success", "type": "bool"}]}
]"""

MARKETPLACE_ABI_JSON = """[
    {"type": "constructor", "inputs": [{"name": "owner", "type": "address"}]},
    {"type": "event", "name": "OrderFilled", "inputs": [
        {"indexed": true, "name": "maker", "type": "address"},
        {"indexed": false, "name": "amount", "type": "uint256"}
    ]},
    {"type": "fallback", "stateMutability": "payable"},
    {"type": "receive", "stateMutability": "payable"},
    {
        "type": "function",
        "name": "submitOrders",
        "stateMutability": "nonpayable",
        "inputs": [
            {
                "name": "orders",
                "type": "tuple[]",
                "components": [
                    {"name": "maker", "type": "address"},
                    {"name": "amount", "type": "uint256"}
                ]
            },
            {
                "name": "meta",
                "type": "tuple",
                "components": [
                    {"name": "kind", "type": "uint8"},
                    {
                        "name": "fee",
                        "type": "tuple",
                        "components": [
                            {"name": "recipient", "type": "address"},
                            {"name": "bps", "type": "uint16"}
                        ]
                    }
                ]
            },
            {"name": "note", "type": "string"}
        ],
        "outputs": [
            {"name": "accepted", "type": "bool"},
            {"name": "", "type": "uint256[]"}
        ]
    },
    {
        "type": "function",
        "name": "buyPlot",
        "stateMutability": "payable",
        "inputs": [{"name": "plotId", "type": "uint256"}, {"name": "tokens", "type": "address[]"}]
    },
    {
        "type": "function",
        "name": "plotOwner",
        "stateMutability": "view",
        "inputs": [{"name": "plotId", "type": "uint256"}],
        "outputs": [{"name": "owner", "type": "address"}]
    },
    {
        "name": "defaultsToFunction",
        "inputs": [{"name": "flag", "type": "bool"}],
        "outputs": []
    }
]"""
