"""Notification texts shown by the calendar."""

LOAD_FAILED = "Eventler yüklenirken bir hata oluştu"
CREATED = "Event başarıyla eklendi"
UPDATED = "Event başarıyla güncellendi"
DELETED = "Event başarıyla silindi"
CREATE_FAILED = "Event eklenirken bir hata oluştu. Lütfen tekrar deneyin."
UPDATE_FAILED = "Event güncellenirken bir hata oluştu. Lütfen tekrar deneyin."
DELETE_FAILED = "Event silinirken bir hata oluştu. Lütfen tekrar deneyin."
FORM_INVALID = "Lütfen işaretli alanları düzeltin."
SESSION_EXPIRED = "Oturumunuz sona erdi. Lütfen tekrar giriş yapın."
