import threading
import logging

logger = logging.getLogger(__name__)

class BackgroundTask:
    """Base class untuk background tasks"""
    
    def __init__(self, interval, name="BackgroundTask"):
        self.interval = interval
        self.name = name
        self.thread = None
        self.is_running = False
        self._stop_event = threading.Event()
        
    def task(self):
        """Method yang harus di-override oleh subclass"""
        raise NotImplementedError
        
    def run(self):
        """Main run loop for the background task"""
        # a stop() issued before the thread got here still counts
        self.is_running = not self._stop_event.is_set()
        while self.is_running:
            try:
                self.task()
            except Exception:
                logger.exception(f"Error in {self.name}")
            if self.interval > 0:
                # returns early when stop() is called
                if self._stop_event.wait(self.interval):
                    break
        self.is_running = False
                
    def start(self):
        """Start the background task in a separate thread"""
        self._stop_event.clear()
        self.thread = threading.Thread(target=self.run, daemon=True, name=self.name)
        self.thread.start()
        
    def stop(self):
        """Stop the background task"""
        self.is_running = False
        self._stop_event.set()
        if self.thread: 
            self.thread.join(timeout=5)
