# Sample dashboards loaded into a fresh store
from typing import List
from dashboard_catalog.models.request_models import DashboardCreate

IMAGE_BASE = "https://images.unsplash.com"
IMAGE_PARAMS = "?auto=format&fit=crop&w=800&h=400"


def _image(photo_id: str) -> str:
    return f"{IMAGE_BASE}/{photo_id}{IMAGE_PARAMS}"


SAMPLE_DASHBOARDS: List[DashboardCreate] = [
    DashboardCreate(
        title="Sales Performance Dashboard",
        description="Complete overview of sales metrics with real-time data",
        category="ecom",
        image_url=_image("photo-1551288049-bebda4e38f71"),
        created_by="Analytics Team",
        is_featured=True
    ),
    DashboardCreate(
        title="Financial KPIs Dashboard",
        description="Track financial performance with interactive charts",
        category="business",
        image_url=_image("photo-1460925895917-afdab827c52f"),
        created_by="Finance Department",
        is_featured=True
    ),
    DashboardCreate(
        title="Market Analysis Dashboard",
        description="Competitive analysis and market positioning insights",
        category="strategy",
        image_url=_image("photo-1543286386-713bdd548da4"),
        created_by="Strategy Team",
        is_featured=True
    ),
    DashboardCreate(
        title="Customer Journey Dashboard",
        description="Customer acquisition and retention metrics",
        category="ecom",
        image_url=_image("photo-1559526324-593bc073d938"),
        created_by="Marketing Team"
    ),
    DashboardCreate(
        title="Data Pipeline Status",
        description="Real-time monitoring of data pipelines",
        category="data",
        image_url=_image("photo-1504868584819-f8e8b4b6d7e3"),
        created_by="Data Engineering"
    ),
    DashboardCreate(
        title="HR Performance Metrics",
        description="Employee performance and engagement",
        category="business",
        image_url=_image("photo-1573496130407-57329f01f769"),
        created_by="HR Department"
    ),
    DashboardCreate(
        title="Growth Strategy Analytics",
        description="Future growth projections and scenarios",
        category="strategy",
        image_url=_image("photo-1522071820081-009f0129c71c"),
        created_by="Executive Team"
    ),
    DashboardCreate(
        title="Data Quality Monitoring",
        description="Track data quality metrics across all sources",
        category="data",
        image_url=_image("photo-1551288049-bebda4e38f71"),
        created_by="Data Governance",
        is_featured=True
    ),
    DashboardCreate(
        title="Executive Summary",
        description="High-level business metrics for executive review",
        category="business",
        image_url=_image("photo-1454165804606-c3d57bc86b40"),
        created_by="Business Intelligence",
        is_featured=True
    ),
    DashboardCreate(
        title="Conversion Funnel Analysis",
        description="Detailed breakdown of customer conversion funnel",
        category="ecom",
        image_url=_image("photo-1533750349088-cd871a92f312"),
        created_by="Digital Marketing"
    ),
    DashboardCreate(
        title="Competitor Benchmark",
        description="Market position relative to key competitors",
        category="strategy",
        image_url=_image("photo-1572025442646-866d16c84a54"),
        created_by="Competitive Intelligence"
    ),
    DashboardCreate(
        title="ETL Pipeline Monitoring",
        description="Real-time status of data integration processes",
        category="data",
        image_url=_image("photo-1520869562399-e772f042f422"),
        created_by="Data Engineering"
    ),
    DashboardCreate(
        title="Revenue Forecast",
        description="Projected revenue based on historical trends",
        category="business",
        image_url=_image("photo-1543286386-2e659306cd6c"),
        created_by="Finance Team"
    ),
    DashboardCreate(
        title="Product Performance",
        description="Sales metrics by product category and SKU",
        category="ecom",
        image_url=_image("photo-1556742049-0cfed4f6a45d"),
        created_by="Product Management"
    ),
    DashboardCreate(
        title="Market Expansion",
        description="Analysis of potential new market opportunities",
        category="strategy",
        image_url=_image("photo-1507679799987-c73779587ccf"),
        created_by="Growth Team"
    ),
]

# Seed views are drawn from [MIN_SEED_VIEWS, MAX_SEED_VIEWS)
MIN_SEED_VIEWS = 1000
MAX_SEED_VIEWS = 6000
SEED_RECENT_COUNT = 4
SEED_FAVORITE_EVERY = 3
