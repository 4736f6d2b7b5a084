# src/anticlust/constants/catalog.py
class Catalog:
    """String constants for dataset names."""

    class Data:
        SIM_DATA            = "all_simulated_data"

    class Reporting:
        EXCHANGE_TABLE      = "report_exchange_table"
