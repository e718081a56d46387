from middleware.cors import CORS_HEADERS, PermissiveCORSMiddleware
