from pydantic import BaseModel

class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int
