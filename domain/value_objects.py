"""Domain Value Objects"""
from pydantic import BaseModel, validator
from datetime import date


class DateRange(BaseModel):
    """Half-open stay interval [check_in, check_out)"""
    check_in: date
    check_out: date

    @validator('check_out')
    def check_out_after_check_in(cls, v, values):
        if 'check_in' in values and v <= values['check_in']:
            raise ValueError('Check-out must be after check-in')
        return v

    def nights(self) -> int:
        """Calculate number of nights"""
        return (self.check_out - self.check_in).days

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """Check whether [check_in, check_out) shares at least one night with this range"""
        # Back-to-back stays share a boundary date but no night
        return not (check_out <= self.check_in or check_in >= self.check_out)

    class Config:
        frozen = True
