"""Canned Ozon Seller API responses."""

PRICES_IMPORT_OK = {
    "result": [
        {"product_id": 1001, "offer_id": "SKU-A", "updated": True, "errors": []},
        {"product_id": 1002, "offer_id": "SKU-B", "updated": True, "errors": []},
    ]
}

PRICES_IMPORT_PARTIAL = {
    "result": [
        {"product_id": 1001, "offer_id": "A", "updated": True, "errors": []},
        {
            "product_id": 1002,
            "offer_id": "B",
            "updated": False,
            "errors": [{"code": 1, "message": "x"}],
        },
        {
            "product_id": 1003,
            "offer_id": "C",
            "updated": False,
            "errors": [
                {"code": 2, "message": "y"},
                {"code": 3, "message": "z"},
            ],
        },
    ]
}

STOCKS_IMPORT_PARTIAL = {
    "result": [
        {
            "product_id": 2001,
            "offer_id": "STOCK-1",
            "updated": False,
            "errors": [{"code": "STOCK_TOO_BIG", "message": "stock is too big"}],
        },
        {"product_id": 2002, "offer_id": "STOCK-2", "updated": True, "errors": []},
    ]
}

PRODUCT_LIST_RESPONSE = {
    "result": {
        "items": [
            {"product_id": 1001, "offer_id": "SKU-A", "is_visible": True},
            {"product_id": 1002, "offer_id": "SKU-B", "is_visible": False},
        ],
        "total": 2,
    }
}

PRICES_INFO_RESPONSE = {
    "result": {
        "items": [
            {
                "product_id": 1001,
                "offer_id": "X",
                "price": {"price": "10", "old_price": "15", "premium_price": "9"},
            },
            {
                "product_id": 1002,
                "offer_id": "Y",
                "price": {"price": "200.5", "old_price": "0", "premium_price": ""},
            },
        ],
        "total": 2,
    }
}

ERROR_RESPONSE = {"error": {"code": "BAD_REQUEST", "message": "Invalid request payload"}}
