# staff/models.py
from django.db import models


class Staff(models.Model):
    """
    A specialist who can be booked onto installation jobs.
    is_available is flipped to False by AvailabilityGuard when the staff member
    is assigned and back to True only by release_staff().
    """
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    expertise = models.CharField(max_length=100, blank=True)
    mobile_number = models.CharField(max_length=20)
    email = models.EmailField(max_length=100, unique=True)
    is_available = models.BooleanField(default=True)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "staff"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return self.full_name


class Team(models.Model):
    team_name = models.CharField(max_length=50, unique=True)
    members = models.ManyToManyField(Staff, through="TeamMember", related_name="teams")

    def __str__(self):
        return self.team_name


class TeamMember(models.Model):
    team = models.ForeignKey(Team, on_delete=models.CASCADE)
    staff = models.ForeignKey(Staff, on_delete=models.CASCADE)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["team", "staff"], name="uniq_team_member"),
        ]

    def __str__(self):
        return f"{self.staff.full_name} in {self.team.team_name}"
