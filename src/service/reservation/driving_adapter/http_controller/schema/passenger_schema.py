from pydantic import BaseModel, Field


class PassengerCreateRequest(BaseModel):
    name: str
    phone: str
    email: str
    city: str
    age: int

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Asha Rao',
                'phone': '9876543210',
                'email': 'asha@example.com',
                'city': 'Pune',
                'age': 34,
            }
        }


class PassengerResponse(BaseModel):
    model_config = {'from_attributes': True}

    passenger_id: str = Field(examples=['P001'])
    name: str
    phone: str
    email: str
    city: str
    age: int
