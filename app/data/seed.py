# app/data/seed.py
from app.domain.schemas import Product, User

#kolejnosc definicji = kolejnosc w odpowiedziach
PRODUCTS = (
    Product(id=1, name="Laptop", price=3000),
    Product(id=2, name="Phone", price=1500),
    Product(id=3, name="Tablet", price=2000),
)

USERS = (
    User(id=1, name="David", age=25),
    User(id=2, name="Sarah", age=30),
    User(id=3, name="John", age=40),
)
