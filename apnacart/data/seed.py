# apnacart/data/seed.py
from apnacart.data.models.vegetable import VegetableModel

# (name, fixed weight, image file)
DEFAULT_VEGETABLES = [
    ("Beerakaya", "500g", "Beerakaya.jpeg"),
    ("Beetroot", "250g", "Beetroot.jpg"),
    ("Bitter Gourd", "500g", "Bitter Gourd.jpeg"),
    ("Bottle Gourd(Sorakaya)", "500g", "Bottle Gourd(Sorakaya).jpeg"),
    ("Brinjal Vilote", "250g", "Brinjal Vilote.jpg"),
    ("Brinjal White", "250g", "Brinjal white.jpeg"),
    ("Broad Beans", "250g", "Broad Beans.jpeg"),
    ("Cabbage(1-piece)", "500g", "Cabbage.jpg"),
    ("Capsicum", "250g", "Capsicum.png"),
    ("Carrot", "500g", "Carrot.webp"),
    ("Cauliflower (1-piece)", "500g", "Cauliflower.png"),
    ("Chamagadda", "500g", "Chamagadda.png"),
    ("Cluster Beans", "250g", "Cluster Beans.jpeg"),
    ("Cucumber", "500g", "Cucumber.jpg"),
    ("Curry Leaves + Coriander + Mint Leaves", "250g", "Curry Leaves + Coriander + Mint Leaves.png"),
    ("Dondakaya", "250g", "Dondakaya.jpeg"),
    ("Dosakaya(1-2 pieces)", "250g", "Dosakaya(1-2 pieces).jpeg"),
    ("Drumstick(3-4 pieces)", "250g", "Drumstick.jpg"),
    ("French Beans", "250g", "French Beans.jpeg"),
    ("Garlic", "250g", "Garlic.jpeg"),
    ("Ginger", "250g", "Ginger.jpg"),
    ("Gongura Leaves", "250g", "Gongura Leaves.jpeg"),
    ("Green Chilli Dark", "250g", "Green Chilli Dark.jpeg"),
    ("Green Chilli", "250g", "Green Chilli.jpeg"),
    ("Ladies Finger", "250g", "Ladies Finger.jpg"),
    ("Lemon (4-6 pieces)", "250g", "Lemon.jpg"),
    ("Onion", "500g", "Onion.jpg"),
    ("Palakura Leaves", "250g", "Palakura Leaves.jpeg"),
    ("Potato", "500g", "Potato.jpeg"),
    ("Raw Banana(1-2 Pieces)", "250g", "Raw Banana(2 pieces).jpeg"),
    ("Raw Mango(2 pieces)", "250g", "Raw Mango.jpeg"),
    ("Sweet Potato", "250g", "Sweet Potato.jpeg"),
    ("Tomato", "500g", "Tomato.jpeg"),
]


def default_vegetables():
    return [
        VegetableModel(name=name, fixed_weight=weight, image_url=f"/images/{image}")
        for name, weight, image in DEFAULT_VEGETABLES
    ]
