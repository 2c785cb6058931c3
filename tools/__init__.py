from .equity_tool import EquityEstimate, EquityTool, format_summary

__all__ = ["EquityTool", "EquityEstimate", "format_summary"]
