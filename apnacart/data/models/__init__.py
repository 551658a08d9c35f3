#import all models so SQLAlchemy registers them in Base.metadata

from apnacart.data.models.vegetable import VegetableModel

__all__ = ["VegetableModel"]
