from .charts import build_pea_figure, build_projection_card, build_savings_figure

__all__ = ["build_pea_figure", "build_projection_card", "build_savings_figure"]
