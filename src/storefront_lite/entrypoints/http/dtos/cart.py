from pydantic import BaseModel, Field


class AddToCartRequestDTO(BaseModel):
    product_id: str = Field(min_length=1, examples=["p2"])


class CartLineResponseDTO(BaseModel):
    product_id: str
    name: str
    quantity: int
    price: str
    product_img: str
